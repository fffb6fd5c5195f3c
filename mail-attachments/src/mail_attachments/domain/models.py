"""Domain models for mail attachment extraction."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class PartKind(str, Enum):
    """How a MIME part takes part in attachment extraction."""

    ATTACHMENT = "attachment"
    NESTED_MESSAGE = "nested_message"
    CONTAINER = "container"
    OTHER = "other"


class StoreOptions(BaseModel):
    """Options for a single extract-and-store call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mime_types: list[str] = Field(
        default_factory=list,
        description="Exact content types to keep; empty keeps everything",
    )
    directory: Path = Field(Path("."), description="Destination directory")
    prefix: str = Field("", description="Prepended to every written filename")
