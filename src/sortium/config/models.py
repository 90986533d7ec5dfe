"""Configuration models for dialog graphs and runner settings."""

from pydantic import BaseModel, ConfigDict, Field

from sortium.config.settings import SettingsConfig
from sortium.core.constants import EXIT_NODE_ID


class DialogOption(BaseModel):
    """A labeled choice on a dialog node.

    The source file names the label ``option``; it is exposed as ``label``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: str = Field(alias="option", description="Choice text the classifier must echo")
    next_id: str = Field(description="Destination node id or the 'exit' sentinel")

    @property
    def is_exit(self) -> bool:
        """Whether taking this option ends the conversation."""
        return self.next_id == EXIT_NODE_ID


class DialogNode(BaseModel):
    """One state of the conversation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Node identifier")
    text: str = Field(description="Message shown while the node is current")
    options: tuple[DialogOption, ...] = Field(
        default_factory=tuple, description="Ordered choices rendered to the user"
    )

    @property
    def labels(self) -> list[str]:
        """Option labels in declared order."""
        return [option.label for option in self.options]


class DialogGraphConfig(BaseModel):
    """Node records as read from the dialog file."""

    nodes: list[DialogNode] = Field(default_factory=list)


class SortiumConfig(BaseModel):
    """Root of the settings file."""

    settings: SettingsConfig = Field(default_factory=SettingsConfig)
