from datetime import datetime
from typing import Annotated
from pydantic import BaseModel, Field, computed_field

from fitmarket.content import PLAN_NOT_FOUND, plan_type_label
from fitmarket.models import ContentType

class PurchaseCreate(BaseModel):
    content_type: ContentType
    content_id: Annotated[str, Field(min_length=1, max_length=36)]

class PlanDetails(BaseModel):
    title: str
    description: str
    author_name: str

class PurchaseRead(BaseModel):
    id: str
    buyer_id: str
    content_type: ContentType
    content_id: str
    created_at: datetime
    details: PlanDetails | None = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def type_label(self) -> str:
        return plan_type_label(self.content_type)

    @computed_field
    @property
    def display_title(self) -> str:
        return self.details.title if self.details else PLAN_NOT_FOUND

class CatalogItem(BaseModel):
    """One row of the purchase form's plan picker."""
    id: str
    content_type: ContentType
    title: str
    description: str
    author_id: str
    author_name: str | None = None
    created_at: datetime
    price: float
