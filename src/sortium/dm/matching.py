"""Classifier answer to option matching."""

from collections.abc import Sequence

from sortium.config.models import DialogOption


def match_option(options: Sequence[DialogOption], classification: str) -> DialogOption | None:
    """Return the first option whose label equals the classification.

    Matching is exact string equality in declared order. Anything else,
    including empty answers and labels of other nodes, is a non-match.
    """
    for option in options:
        if option.label == classification:
            return option
    return None
