"""Pydantic models for the JSON seed document the entity store loads.

Document shape: {"users": [...], "content": [...]}; each content record
references its author by "authorId".
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portal.shared.enums import ContentType


class _SeedModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class SeedUser(_SeedModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: str
    department: str | None = None
    avatar: str | None = None


class SeedContent(_SeedModel):
    id: str = Field(..., min_length=1)
    title: str
    content: str
    author_id: str
    created_at: datetime
    updated_at: datetime
    tags: list[str] = Field(default_factory=list)
    type: ContentType


class SeedDocument(_SeedModel):
    users: list[SeedUser]
    content: list[SeedContent]
