# fitmarket/services/dashboard.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import Session

from fitmarket.models import ContentType, User, UserRole
from fitmarket.repositories.catalog_repo import NutritionPlanRepository, WorkoutRepository
from fitmarket.schemas.dashboard import Dashboard, DashboardStats, UploadedContent
from fitmarket.schemas.user import UserRead
from fitmarket.services.purchasing import purchase_history

RECENT_WINDOW = timedelta(days=7)


def _aware(ts: datetime) -> datetime:
    # sqlite hands back naive datetimes
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=timezone.utc)


def uploaded_content(db: Session, user: User) -> list[UploadedContent]:
    content: list[UploadedContent] = []
    if user.role == UserRole.trainer:
        for w in WorkoutRepository(db).list(author_id=user.id, limit=None):
            content.append(UploadedContent(
                id=w.id, content_type=ContentType.workout, title=w.title,
                description=w.description, created_at=w.created_at, video_url=w.video_url,
            ))
    if user.role == UserRole.nutritionist:
        for p in NutritionPlanRepository(db).list(author_id=user.id, limit=None):
            content.append(UploadedContent(
                id=p.id, content_type=ContentType.nutrition, title=p.title,
                description=p.description, created_at=p.created_at, document_url=p.document_url,
            ))
    content.sort(key=lambda item: _aware(item.created_at), reverse=True)
    return content


def build_dashboard(db: Session, user: User, *, now: Optional[datetime] = None) -> Dashboard:
    now = now or datetime.now(timezone.utc)
    profile = UserRead.model_validate(user)

    if user.role == UserRole.client:
        purchases = purchase_history(db, user.id)
        return Dashboard(
            profile=profile,
            stats=DashboardStats(total_purchases=len(purchases)),
            purchases=purchases,
            workout_purchases=sum(1 for p in purchases if p.content_type == ContentType.workout),
            nutrition_purchases=sum(1 for p in purchases if p.content_type == ContentType.nutrition),
        )

    content = uploaded_content(db, user)
    since = now - RECENT_WINDOW
    return Dashboard(
        profile=profile,
        stats=DashboardStats(
            total_uploads=len(content),
            recent_activity=sum(1 for item in content if _aware(item.created_at) > since),
        ),
        content=content,
    )
