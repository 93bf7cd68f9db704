"""Pydantic schema for raw sprite records handed over by the sprite library loader."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SpriteDescriptor(BaseModel):
    """One library sprite. Unknown keys are kept and copied onto the layout node."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")
    identity: str = Field(..., min_length=1)
    parent_identity: Optional[str] = Field(default=None, alias="parentIdentity")
    display_name: str = Field(default="", alias="displayName")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("display_name", mode="before")
    @classmethod
    def _missing_name_is_empty(cls, v: Optional[str]) -> str:
        return "" if v is None else v


def normalize_descriptors(raw: List[Any]) -> List[Dict[str, Any]]:
    """Validate raw records (dicts or models) into plain snake_case dicts. Raises pydantic ValidationError."""
    out = []
    for item in raw:
        if isinstance(item, SpriteDescriptor):
            out.append(item.model_dump())
        else:
            out.append(SpriteDescriptor.model_validate(item).model_dump())
    return out
