# fitmarket/repositories/purchase_repo.py
from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from sqlalchemy import select

from fitmarket.models import ContentType, NutritionPlan, Purchase, WorkoutContent
from fitmarket.repositories.base import BaseRepository
from fitmarket.repositories.catalog_repo import (
    CatalogRepository,
    NutritionPlanRepository,
    WorkoutRepository,
)

PurchasableContent = Union[WorkoutContent, NutritionPlan]

@dataclass(frozen=True, slots=True)
class ContentRef:
    """Tagged pointer to a purchasable row: the tag picks the table, the id the row."""
    content_type: ContentType
    content_id: str

    @classmethod
    def of(cls, purchase: Purchase) -> "ContentRef":
        return cls(ContentType(purchase.content_type), purchase.content_id)

class PurchaseRepository(BaseRepository[Purchase]):
    model = Purchase

    def catalog_for(self, content_type: ContentType) -> CatalogRepository:
        if content_type == ContentType.workout:
            return WorkoutRepository(self.db)
        if content_type == ContentType.nutrition:
            return NutritionPlanRepository(self.db)
        raise ValueError(f"unknown content type {content_type!r}")

    # READS
    def list_by_buyer(self, buyer_id: str, *, limit: Optional[int] = None, offset: int = 0) -> list[Purchase]:
        """Newest first; no limit returns the whole history."""
        stmt = select(Purchase).where(Purchase.buyer_id == buyer_id)\
                               .order_by(Purchase.created_at.desc())\
                               .limit(limit).offset(offset)
        return list(self.db.execute(stmt).scalars().all())

    def resolve(self, ref: ContentRef) -> Optional[PurchasableContent]:
        return self.catalog_for(ref.content_type).get(ref.content_id)

    def resolve_many(self, refs: Iterable[ContentRef]) -> dict[ContentRef, Optional[PurchasableContent]]:
        """One query per content type; refs whose row is gone map to None."""
        refs = list(refs)
        by_type: dict[ContentType, set[str]] = defaultdict(set)
        for ref in refs:
            by_type[ref.content_type].add(ref.content_id)
        found: dict[ContentType, dict[str, PurchasableContent]] = {
            ctype: self.catalog_for(ctype).get_many(ids) for ctype, ids in by_type.items()
        }
        return {ref: found[ref.content_type].get(ref.content_id) for ref in refs}

    # WRITES
    def create(self, *, buyer_id: str, content_type: ContentType, content_id: str) -> Purchase:
        # no uniqueness on (buyer, content): a resubmitted form buys twice
        return self.save(Purchase(buyer_id=buyer_id, content_type=content_type, content_id=content_id))
