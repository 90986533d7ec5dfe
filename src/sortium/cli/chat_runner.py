"""Interactive dialog runner for the Sortium CLI."""

import logging
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Prompt

from sortium.config.loader import ConfigLoader
from sortium.config.models import SortiumConfig
from sortium.core.errors import DialogLookupError
from sortium.core.interfaces import IIntentClassifier
from sortium.core.message_sink import MessageSink
from sortium.dm.engine import DialogEngine
from sortium.dm.graph import DialogGraph
from sortium.du.classifier import LMIntentClassifier
from sortium.du.prompt import PromptTemplate
from sortium.observability.logging import setup_logging

logger = logging.getLogger(__name__)


class ConsoleMessageSink(MessageSink):
    """Sink that prints to rich console."""

    def __init__(self, console: Console):
        self.console = console

    def send(self, message: str) -> None:
        # Dialog text is authored content, never rich markup.
        self.console.print(message, markup=False, highlight=False)


@dataclass
class ChatConfig:
    """Configuration for chat runner."""

    settings_path: Path | None = None
    dialog_path: Path | None = None
    template_path: Path | None = None
    model: str | None = None
    log_level: str | None = None
    debug: bool = False


class ChatRunner:
    """Interactive dialog session runner.

    Loads settings, the dialog graph, and the decision template, builds the
    classifier, and drives a DialogEngine against the terminal.
    """

    def __init__(self, config: ChatConfig, console: Console | None = None):
        """Initialize chat runner.

        Args:
            config: Chat configuration
            console: Console to print to (a fresh one by default)
        """
        self.config = config
        self.console = console or Console()
        self.engine: DialogEngine | None = None
        self.settings: SortiumConfig | None = None

    def load_settings(self) -> SortiumConfig:
        """Read settings and apply command-line overrides."""
        settings = ConfigLoader.load(self.config.settings_path)
        if self.config.dialog_path is not None:
            settings.settings.paths.dialog = str(self.config.dialog_path)
        if self.config.template_path is not None:
            settings.settings.paths.template = str(self.config.template_path)
        if self.config.model is not None:
            settings.settings.classifier.model = self.config.model
        if self.config.log_level is not None:
            settings.settings.logging.level = self.config.log_level.upper()  # type: ignore[assignment]
        if self.config.debug:
            settings.settings.logging.level = "DEBUG"
        return settings

    def setup(self, classifier: IIntentClassifier | None = None) -> DialogEngine:
        """Load every input and build the engine.

        All load-time failures surface here, before the first turn.

        Raises:
            FileNotFoundError: If a source file is missing.
            ConfigError: If a source file is malformed or the credential
                is missing.
        """
        load_dotenv()

        self.settings = self.load_settings()
        cfg = self.settings.settings
        setup_logging(cfg.logging.level, cfg.logging.file)

        graph = DialogGraph.from_file(cfg.paths.dialog)
        template = PromptTemplate.from_file(cfg.paths.template)
        if classifier is None:
            classifier = LMIntentClassifier.from_settings(cfg.classifier)

        self.engine = DialogEngine(
            graph=graph,
            template=template,
            classifier=classifier,
            read_input=self.read_line,
            sink=ConsoleMessageSink(self.console),
            agent=cfg.agent,
        )
        logger.info(f"Dialog ready: {len(graph)} nodes, classifier {cfg.classifier.model_id}")
        return self.engine

    def read_line(self) -> str:
        """Block until the user enters one line."""
        return Prompt.ask("[bold green]You[/]", console=self.console)

    def start(self) -> None:
        """Run the conversation until an exit edge or a fatal error."""
        if self.engine is None:
            self.setup()
        assert self.engine is not None

        try:
            self.engine.run()
        except (KeyboardInterrupt, EOFError):
            self.console.print("\n[yellow]Goodbye![/]")
        except DialogLookupError as e:
            logger.error(f"Dialog graph is broken: {e}")
            self.engine.say(self.engine.agent.lookup_failure)
            raise


def run_chat_session(config: ChatConfig) -> None:
    """Run an interactive dialog session.

    Args:
        config: Chat configuration
    """
    runner = ChatRunner(config)
    runner.setup()
    runner.start()
