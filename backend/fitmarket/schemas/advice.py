from datetime import datetime
from pydantic import BaseModel, computed_field, field_validator

from fitmarket.content import category_label, is_youtube_url, role_label
from fitmarket.models import UserRole
from fitmarket.schemas.common import AdviceBodyStr, TitleStr, required_text

class AdviceCreate(BaseModel):
    title: TitleStr
    body: AdviceBodyStr
    video_url: str | None = None
    category: str | None = None

    @field_validator("title", "body")
    @classmethod
    def not_blank(cls, v: str, info) -> str:
        return required_text(v, info.field_name)

    @field_validator("video_url", "category")
    @classmethod
    def empty_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("video_url")
    @classmethod
    def youtube_only(cls, v: str | None) -> str | None:
        if v is not None and not is_youtube_url(v):
            raise ValueError("video_url must be a valid YouTube URL or empty")
        return v

class AdviceRead(BaseModel):
    id: str
    title: str
    body: str
    video_url: str | None = None
    category: str | None = None
    author_id: str
    author_name: str | None = None
    author_role: UserRole | None = None
    created_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def category_label(self) -> str:
        return category_label(self.category)

    @computed_field
    @property
    def author_role_label(self) -> str | None:
        return role_label(self.author_role) if self.author_role else None

class CategoryOption(BaseModel):
    value: str
    label: str
