"""Settings configuration models.

Global settings for the agent voice, the classifier model, file locations,
and logging.
"""

from typing import Literal

from pydantic import BaseModel, Field

from sortium.core.constants import (
    DEFAULT_AGENT_NAME,
    DEFAULT_FAREWELL,
    DEFAULT_LOOKUP_FAILURE,
    DEFAULT_NOT_UNDERSTOOD,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AgentConfig(BaseModel):
    """Agent name and fixed lines."""

    name: str = Field(default=DEFAULT_AGENT_NAME, description="Prefix for every agent line")
    farewell: str = Field(default=DEFAULT_FAREWELL, description="Line shown on an exit edge")
    not_understood: str = Field(
        default=DEFAULT_NOT_UNDERSTOOD, description="Line shown when no option matches"
    )
    lookup_failure: str = Field(
        default=DEFAULT_LOOKUP_FAILURE, description="Apology shown before a lookup abort"
    )


class ClassifierConfig(BaseModel):
    """Static generation parameters for the completion model."""

    provider: str = Field(default="openai", description="Model provider (openai, anthropic, etc.)")
    model: str = Field(default="gpt-3.5-turbo-instruct", description="Model identifier")
    api_key_env: str = Field(
        default="OPENAI_API_KEY", description="Environment variable holding the credential"
    )
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=256, gt=0)
    top_p: float = Field(default=1.0, ge=0.0, le=1.0)
    frequency_penalty: float = Field(default=0.0, ge=-2.0, le=2.0)
    presence_penalty: float = Field(default=0.0, ge=-2.0, le=2.0)
    cache: bool = Field(default=False, description="Reuse cached completions for equal prompts")

    @property
    def model_id(self) -> str:
        """Model string in provider/model form."""
        return f"{self.provider}/{self.model}"


class PathsConfig(BaseModel):
    """Locations of the dialog graph and decision template."""

    dialog: str = Field(default="dialog.yaml")
    template: str = Field(default="prompt_decision_template.yaml")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="WARNING")
    file: str | None = Field(default="sortium.log", description="JSON log file, None to disable")


class SettingsConfig(BaseModel):
    """Global settings configuration."""

    agent: AgentConfig = Field(default_factory=AgentConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
