# fitmarket/repositories/catalog_repo.py
from __future__ import annotations
from typing import Iterable, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from fitmarket.models import Advice, NutritionPlan, WorkoutContent
from fitmarket.repositories.base import BaseRepository

C = TypeVar("C", WorkoutContent, NutritionPlan, Advice)

class CatalogRepository(BaseRepository[C]):
    """Author-created content tables; every read joins the author for display names."""

    def list(self, *, author_id: Optional[str] = None, limit: Optional[int] = 50, offset: int = 0) -> list[C]:
        stmt = select(self.model).options(joinedload(self.model.author))
        if author_id is not None:
            stmt = stmt.where(self.model.author_id == author_id)
        stmt = stmt.order_by(self.model.created_at.desc()).limit(limit).offset(offset)
        return list(self.db.execute(stmt).scalars().all())

    def get_many(self, ids: Iterable[str]) -> dict[str, C]:
        ids = set(ids)
        if not ids:
            return {}
        stmt = select(self.model).options(joinedload(self.model.author)).where(self.model.id.in_(ids))
        return {row.id: row for row in self.db.execute(stmt).scalars().all()}

class WorkoutRepository(CatalogRepository[WorkoutContent]):
    model = WorkoutContent

    def create(self, *, author_id: str, title: str, description: str, video_url: str) -> WorkoutContent:
        return self.save(WorkoutContent(author_id=author_id, title=title, description=description, video_url=video_url))

class NutritionPlanRepository(CatalogRepository[NutritionPlan]):
    model = NutritionPlan

    def create(self, *, author_id: str, title: str, description: str, document_url: str) -> NutritionPlan:
        return self.save(NutritionPlan(author_id=author_id, title=title, description=description, document_url=document_url))

class AdviceRepository(CatalogRepository[Advice]):
    model = Advice

    def create(
        self,
        *,
        author_id: str,
        title: str,
        body: str,
        video_url: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Advice:
        return self.save(Advice(author_id=author_id, title=title, body=body, video_url=video_url, category=category))
