from datetime import datetime
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import ForeignKey, String, DateTime, func, Enum as SAEnum
from fitmarket.db import Base, new_id, utcnow

class ContentType(str, Enum):
    workout = "workout"
    nutrition = "nutrition"

class Purchase(Base):
    __tablename__ = "purchases"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    buyer_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    content_type: Mapped[ContentType] = mapped_column(SAEnum(ContentType, name="content_type"), nullable=False)
    # points at workout_content or nutrition_plans depending on content_type; no FK
    content_id: Mapped[str] = mapped_column(String(36), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    buyer = relationship("User", back_populates="purchases")
