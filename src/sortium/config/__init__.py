"""Configuration module for Sortium."""

from sortium.config.loader import ConfigLoader, DialogLoader, TemplateLoader
from sortium.config.models import DialogGraphConfig, DialogNode, DialogOption, SortiumConfig
from sortium.config.settings import (
    AgentConfig,
    ClassifierConfig,
    LoggingConfig,
    PathsConfig,
    SettingsConfig,
)

__all__ = [
    "SortiumConfig",
    "SettingsConfig",
    "AgentConfig",
    "ClassifierConfig",
    "PathsConfig",
    "LoggingConfig",
    "DialogNode",
    "DialogOption",
    "DialogGraphConfig",
    "ConfigLoader",
    "DialogLoader",
    "TemplateLoader",
]
