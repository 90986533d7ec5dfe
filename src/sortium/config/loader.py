"""Loaders for the settings, dialog graph, and decision template files."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from sortium.config.models import DialogGraphConfig, DialogNode, SortiumConfig
from sortium.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = "sortium.yaml"


class ConfigLoader:
    """Load SortiumConfig from YAML files."""

    @staticmethod
    def load(path: Path | str | None = None) -> SortiumConfig:
        """Load settings from a YAML file.

        Args:
            path: Path to a settings file or a directory containing
                sortium.yaml. None loads defaults only.

        Returns:
            Parsed SortiumConfig. Relative dialog and template paths are
            resolved against the settings file's directory.
        """
        if path is None:
            return SortiumConfig()

        config_path = Path(path)
        if config_path.is_dir():
            config_path = config_path / DEFAULT_SETTINGS_FILE
        if not config_path.exists():
            raise FileNotFoundError(f"Settings file not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigError(f"Settings file must contain a mapping: {config_path}")

        try:
            config = SortiumConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in {config_path}: {e}") from e

        base_dir = config_path.parent
        paths = config.settings.paths
        paths.dialog = str(_resolve(base_dir, paths.dialog))
        paths.template = str(_resolve(base_dir, paths.template))
        logger.debug(f"Loaded settings from {config_path}")
        return config


class DialogLoader:
    """Load dialog node records from a YAML sequence."""

    @staticmethod
    def load(path: Path | str) -> list[DialogNode]:
        """Load the node records of a dialog file.

        Only the shape of each record is checked here. Edge targets and the
        presence of a start node are resolved when the dialog runs.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            ConfigError: If the document is not a list of node records.
        """
        dialog_path = Path(path)
        if not dialog_path.exists():
            raise FileNotFoundError(f"Dialog file not found: {dialog_path}")

        with open(dialog_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = []

        try:
            graph = DialogGraphConfig.model_validate({"nodes": data})
        except ValidationError as e:
            raise ConfigError(f"Invalid dialog file {dialog_path}: {e}") from e

        logger.info(f"Loaded {len(graph.nodes)} dialog nodes from {dialog_path}")
        return graph.nodes


class TemplateLoader:
    """Load the decision prompt template as raw text."""

    @staticmethod
    def load(path: Path | str) -> str:
        """Read the template file verbatim.

        The file keeps its historical .yaml extension but is not parsed.
        """
        template_path = Path(path)
        if not template_path.exists():
            raise FileNotFoundError(f"Template file not found: {template_path}")
        return template_path.read_text(encoding="utf-8")


def _resolve(base_dir: Path, value: str) -> Path:
    candidate = Path(value).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate
