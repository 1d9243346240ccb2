"""
Pydantic schemas for admin API responses.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class FormFieldSchema(BaseSchema):
    """One rendered form field."""
    name: str
    type: str
    mapped: bool = True
    required: bool = False
    value: Optional[Any] = None


class EditForm(BaseSchema):
    """Edit form for one object, as rendered for a client."""
    admin: str
    object_id: str
    uniqid: str = Field(..., description="Key under which the client must post the form inputs")
    fields: List[FormFieldSchema] = Field(default_factory=list)


class AdminList(BaseSchema):
    admins: List[str] = Field(default_factory=list)
