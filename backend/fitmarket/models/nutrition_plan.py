from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import ForeignKey, String, Text, DateTime, func
from fitmarket.db import Base, new_id, utcnow

class NutritionPlan(Base):
    __tablename__ = "nutrition_plans"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    document_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    author_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    author = relationship("User", back_populates="nutrition_plans")

    @property
    def author_name(self) -> str | None:
        return self.author.name if self.author else None
