from datetime import datetime
from pydantic import BaseModel, field_validator

from fitmarket.schemas.common import DescriptionStr, TitleStr, required_text

class NutritionPlanCreate(BaseModel):
    title: TitleStr
    description: DescriptionStr

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, v: str, info) -> str:
        return required_text(v, info.field_name)

class NutritionPlanRead(BaseModel):
    id: str
    title: str
    description: str
    document_url: str
    author_id: str
    author_name: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
