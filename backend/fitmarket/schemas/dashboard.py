from datetime import datetime
from pydantic import BaseModel, computed_field

from fitmarket.content import content_type_label
from fitmarket.models import ContentType
from fitmarket.schemas.purchase import PurchaseRead
from fitmarket.schemas.user import UserRead

class DashboardStats(BaseModel):
    total_purchases: int = 0
    total_uploads: int = 0
    recent_activity: int = 0

class UploadedContent(BaseModel):
    id: str
    content_type: ContentType
    title: str
    description: str
    created_at: datetime
    video_url: str | None = None
    document_url: str | None = None

    @computed_field
    @property
    def type_label(self) -> str:
        return content_type_label(self.content_type)

class Dashboard(BaseModel):
    profile: UserRead
    stats: DashboardStats
    # client view
    purchases: list[PurchaseRead] = []
    workout_purchases: int = 0
    nutrition_purchases: int = 0
    # professional view
    content: list[UploadedContent] = []
