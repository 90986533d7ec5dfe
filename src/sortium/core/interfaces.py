"""Core interfaces (Protocols) consumed by the dialog engine."""

from typing import Protocol


class IIntentClassifier(Protocol):
    """Interface for intent classifiers.

    Receives a fully rendered decision prompt and returns the classifier's
    answer as plain text. Implementations raise ``ClassifierError``
    subclasses for transport, parsing, or empty-response failures.
    """

    def classify(self, prompt: str) -> str:
        """Classify a rendered prompt and return the trimmed answer."""
        ...


class IInputReader(Protocol):
    """Interface for the blocking per-turn input read."""

    def __call__(self) -> str:
        """Return one raw line typed by the user."""
        ...
