"""Core types shared across Sortium."""

from sortium.core.constants import EXIT_NODE_ID, START_NODE_ID, EngineState, TurnOutcome
from sortium.core.errors import (
    ClassifierEmptyResponseError,
    ClassifierError,
    ClassifierResponseError,
    ClassifierTransportError,
    ConfigError,
    CredentialsError,
    DialogLookupError,
    EngineStateError,
    SortiumError,
    TemplateError,
)
from sortium.core.interfaces import IInputReader, IIntentClassifier
from sortium.core.message_sink import BufferedMessageSink, MessageSink

__all__ = [
    "START_NODE_ID",
    "EXIT_NODE_ID",
    "EngineState",
    "TurnOutcome",
    "SortiumError",
    "ConfigError",
    "TemplateError",
    "CredentialsError",
    "DialogLookupError",
    "EngineStateError",
    "ClassifierError",
    "ClassifierTransportError",
    "ClassifierResponseError",
    "ClassifierEmptyResponseError",
    "IIntentClassifier",
    "IInputReader",
    "MessageSink",
    "BufferedMessageSink",
]
