"""
Navigation data models for the KV path filter.

This module defines the decision returned for every filter input event and the
closed set of input events the engine accepts.
"""

from typing import Dict, Optional, Any, Union, Literal, Annotated
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .entry import SEPARATOR


class NavigationDecision(BaseModel):
    """
    The outcome of a filter input event.

    Attributes:
        target_directory: Directory to display ('' is the namespace root)
        residual_filter: Substring to filter the listing by, None for no filter
        is_directory_change: Whether the caller must perform a route transition
    """

    model_config = ConfigDict(frozen=True)

    target_directory: str = Field("", description="Directory to display")
    residual_filter: Optional[str] = Field(None, description="Filter applied within the directory")
    is_directory_change: bool = Field(False, description="Whether a route transition is required")

    @field_validator('target_directory')
    @classmethod
    def validate_target_directory(cls, v: str) -> str:
        """Ensure the target is the root or a separator-terminated directory."""
        if v and not v.endswith(SEPARATOR):
            raise ValueError(f"Target directory must end with '{SEPARATOR}': {v}")
        return v

    @field_validator('residual_filter')
    @classmethod
    def validate_residual_filter(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty filter as no filter."""
        return v or None

    def has_filter(self) -> bool:
        """Check if the decision narrows the listing."""
        return self.residual_filter is not None

    def input_value(self) -> str:
        """Reconstruct the text the filter box shows for this decision."""
        return self.target_directory + (self.residual_filter or "")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the decision to a dictionary representation."""
        return self.model_dump()

    def __str__(self) -> str:
        parts = [f"Directory: '{self.target_directory or '/'}'"]
        if self.has_filter():
            parts.append(f"Filter: '{self.residual_filter}'")
        if self.is_directory_change:
            parts.append("Transition")
        return " | ".join(parts)


class EditEvent(BaseModel):
    """Any ordinary change to the filter text (typing, pasting, cutting)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal['edit'] = 'edit'
    value: str = Field("", description="Full contents of the filter box after the edit")


class BackspaceEvent(BaseModel):
    """A backspace key press, raised before the character is removed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal['backspace'] = 'backspace'
    previous_value: str = Field("", description="Contents of the filter box before the deletion")


class EscapeEvent(BaseModel):
    """An escape key press."""

    model_config = ConfigDict(frozen=True)

    kind: Literal['escape'] = 'escape'


FilterEvent = Annotated[Union[EditEvent, BackspaceEvent, EscapeEvent], Field(discriminator='kind')]
