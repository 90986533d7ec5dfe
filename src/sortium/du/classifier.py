"""Intent classification over a text-completion model.

The classifier sends the rendered decision prompt as the only input to a
completion model and returns the first candidate's text, trimmed. Whether
that text names one of the node's options is the engine's concern, not the
classifier's.
"""

import logging
import os
from collections.abc import Sequence
from typing import Any

import dspy

from sortium.config.settings import ClassifierConfig
from sortium.core.errors import (
    ClassifierEmptyResponseError,
    ClassifierResponseError,
    ClassifierTransportError,
    CredentialsError,
)

logger = logging.getLogger(__name__)


def extract_first_candidate(outputs: Any) -> str:
    """Return the trimmed text of the first completion candidate.

    Accepts the list returned by ``dspy.LM``, whose entries are either
    strings or dicts carrying a ``text`` key.

    Raises:
        ClassifierResponseError: If the response does not have that shape.
        ClassifierEmptyResponseError: If there are no candidates.
    """
    if not isinstance(outputs, Sequence) or isinstance(outputs, (str, bytes)):
        raise ClassifierResponseError(
            f"Expected a list of completions, got {type(outputs).__name__}"
        )
    if len(outputs) == 0:
        raise ClassifierEmptyResponseError()

    first = outputs[0]
    if isinstance(first, dict):
        first = first.get("text")
    if not isinstance(first, str):
        raise ClassifierResponseError(
            f"Completion candidate has no text: {type(first).__name__}"
        )
    return first.strip()


class LMIntentClassifier:
    """Classifier backed by a ``dspy.LM`` text-completion model.

    Generation parameters are fixed at construction time from settings and
    never depend on conversation state. Failed calls are not retried.
    """

    def __init__(self, config: ClassifierConfig, api_key: str, lm: dspy.LM | None = None):
        self.config = config
        self.lm = lm or dspy.LM(
            config.model_id,
            model_type="text",
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            top_p=config.top_p,
            frequency_penalty=config.frequency_penalty,
            presence_penalty=config.presence_penalty,
            cache=config.cache,
            num_retries=0,
            api_key=api_key,
        )

    @classmethod
    def from_settings(cls, config: ClassifierConfig) -> "LMIntentClassifier":
        """Build a classifier using the credential from the environment.

        Raises:
            CredentialsError: If the configured variable is unset or empty.
        """
        api_key = os.getenv(config.api_key_env)
        if not api_key:
            raise CredentialsError(
                f"{config.api_key_env} not found. Set it in your environment or .env file"
            )
        return cls(config, api_key=api_key)

    def classify(self, prompt: str) -> str:
        """Send one prompt and return the first candidate's trimmed text."""
        logger.debug(f"Classifying with {self.config.model_id} ({len(prompt)} chars)")
        try:
            outputs = self.lm(prompt=prompt)
        except Exception as e:
            logger.error(f"Completion request failed: {e}")
            raise ClassifierTransportError(f"Completion request failed: {e}") from e

        answer = extract_first_candidate(outputs)
        logger.debug(f"Classifier answered {answer!r}")
        return answer
