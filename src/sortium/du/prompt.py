"""Decision prompt template.

The template is a plain text blob with three placeholders:

    {decision_prompt}  the current node's text
    {option_list}      the node's option labels as a YAML sequence
    {user_response}    the user's line, stripped

Rendering substitutes every placeholder in a single pass, so values that
happen to contain placeholder text are inserted literally.
"""

import re
from collections.abc import Sequence
from pathlib import Path

import yaml

from sortium.config.loader import TemplateLoader
from sortium.config.models import DialogNode
from sortium.core.errors import TemplateError

PLACEHOLDERS = ("decision_prompt", "option_list", "user_response")

_PLACEHOLDER_RE = re.compile(r"\{(" + "|".join(PLACEHOLDERS) + r")\}")


def format_option_list(labels: Sequence[str]) -> str:
    """Serialize option labels as a YAML block sequence, order preserved."""
    return yaml.safe_dump(
        list(labels),
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )


class PromptTemplate:
    """Parametrized decision prompt."""

    def __init__(self, text: str):
        missing = [name for name in PLACEHOLDERS if "{" + name + "}" not in text]
        if missing:
            raise TemplateError(
                "Template is missing placeholders: " + ", ".join("{" + m + "}" for m in missing)
            )
        self.text = text

    @classmethod
    def from_file(cls, path: Path | str) -> "PromptTemplate":
        """Load a template file."""
        return cls(TemplateLoader.load(path))

    def render(self, decision_prompt: str, option_list: str, user_response: str) -> str:
        """Fill all placeholders.

        Pure function of its three arguments.
        """
        values = {
            "decision_prompt": decision_prompt,
            "option_list": option_list,
            "user_response": user_response,
        }
        return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], self.text)

    def build_prompt(self, node: DialogNode, user_input: str) -> str:
        """Render the decision prompt for a node and a raw user line."""
        return self.render(
            decision_prompt=node.text,
            option_list=format_option_list(node.labels),
            user_response=user_input.strip(),
        )
