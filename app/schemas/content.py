# app/schemas/content.py
from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

ContentType = Literal["article", "video", "course", "download"]


class ContentCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    content_type: ContentType
    content_url: Optional[str] = None
    content_body: Optional[str] = None
    required_membership_level_id: Optional[int] = None # None - бесплатный контент
    is_published: bool = False

class ContentUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    content_type: Optional[ContentType] = None
    content_url: Optional[str] = None
    content_body: Optional[str] = None
    required_membership_level_id: Optional[int] = None
    is_published: Optional[bool] = None

    @field_validator("title", "content_type", "is_published")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v

class Content(BaseModel):
    id: int
    title: str
    description: str | None = None
    content_type: ContentType
    content_url: str | None = None
    content_body: str | None = None
    required_membership_level_id: int | None = None
    is_published: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
