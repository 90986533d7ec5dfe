"""MessageSink interface for delivering agent lines to the user.

The engine never prints directly; it hands every display line to a sink so
the console runner and the tests can decide where the text goes.
"""

from abc import ABC, abstractmethod


class MessageSink(ABC):
    """Interface for sending messages to the user."""

    @abstractmethod
    def send(self, message: str) -> None:
        """Send a message to the user immediately."""
        ...


class BufferedMessageSink(MessageSink):
    """Buffers messages for testing or batch delivery."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def send(self, message: str) -> None:
        """Append message to buffer."""
        self.messages.append(message)

    def clear(self) -> None:
        """Clear the message buffer."""
        self.messages.clear()
