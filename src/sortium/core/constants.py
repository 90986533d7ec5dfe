"""Core constants and enums."""

from enum import Enum

START_NODE_ID = "start"
EXIT_NODE_ID = "exit"

DEFAULT_AGENT_NAME = "Sortium"
DEFAULT_FAREWELL = "Thank you for using the dialog system."
DEFAULT_NOT_UNDERSTOOD = "I'm sorry, I didn't understand your response."
DEFAULT_LOOKUP_FAILURE = "Oops, something went wrong. Please try again."

OPTION_BULLET = "- "


class EngineState(str, Enum):
    """State of the dialog engine."""

    RUNNING = "running"
    TERMINATED = "terminated"


class TurnOutcome(str, Enum):
    """How a single turn ended."""

    ADVANCED = "advanced"
    NO_MATCH = "no_match"
    TERMINATED = "terminated"
