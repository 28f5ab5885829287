from datetime import datetime
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, DateTime, func, Enum as SAEnum
from fitmarket.db import Base, new_id, utcnow

class UserRole(str, Enum):
    client = "client"
    trainer = "trainer"
    nutritionist = "nutritionist"

class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False, server_default="")
    # fixed at registration; only avatar_url changes afterwards
    role: Mapped[UserRole] = mapped_column(
        SAEnum(UserRole, name="user_role"),
        nullable=False,
        server_default=UserRole.client.value,
    )
    avatar_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    workouts = relationship("WorkoutContent", back_populates="author")
    nutrition_plans = relationship("NutritionPlan", back_populates="author")
    advice = relationship("Advice", back_populates="author")
    purchases = relationship("Purchase", back_populates="buyer")
