from datetime import datetime
from pydantic import BaseModel, computed_field, field_validator

from fitmarket.content import is_youtube_url, video_source
from fitmarket.schemas.common import DescriptionStr, TitleStr, required_text

class WorkoutCreate(BaseModel):
    title: TitleStr
    description: DescriptionStr
    # either a YouTube link or an uploaded file; the router enforces exactly one
    video_url: str | None = None

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, v: str, info) -> str:
        return required_text(v, info.field_name)

    @field_validator("video_url")
    @classmethod
    def youtube_only(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not is_youtube_url(v):
            raise ValueError("video_url must be a valid YouTube URL")
        return v

class WorkoutRead(BaseModel):
    id: str
    title: str
    description: str
    video_url: str
    author_id: str
    author_name: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def source(self) -> str:
        return video_source(self.video_url)
