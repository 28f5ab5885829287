# fitmarket/services/purchasing.py
from __future__ import annotations

import logging
import time
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitmarket.content import UNKNOWN_AUTHOR, price_for
from fitmarket.errors import CatalogWriteError, ContentNotFound
from fitmarket.models import ContentType, Purchase, User
from fitmarket.repositories.purchase_repo import ContentRef, PurchasableContent, PurchaseRepository
from fitmarket.schemas.purchase import CatalogItem, PlanDetails, PurchaseCreate, PurchaseRead
from fitmarket.services.publishing import db_error_text

log = logging.getLogger(__name__)


def catalog(db: Session, content_type: ContentType, *, limit: Optional[int] = 100, offset: int = 0) -> list[CatalogItem]:
    """Items a client can pick from, newest first, priced from the static table."""
    rows = PurchaseRepository(db).catalog_for(content_type).list(limit=limit, offset=offset)
    price = price_for(content_type)
    return [
        CatalogItem(
            id=row.id,
            content_type=content_type,
            title=row.title,
            description=row.description,
            author_id=row.author_id,
            author_name=row.author_name,
            created_at=row.created_at,
            price=price,
        )
        for row in rows
    ]


def purchase(db: Session, buyer: User, payload: PurchaseCreate, *, delay_seconds: float = 0) -> Purchase:
    repo = PurchaseRepository(db)
    ref = ContentRef(payload.content_type, payload.content_id)
    if repo.resolve(ref) is None:
        raise ContentNotFound(ref.content_type.value, ref.content_id)

    # stands in for a payment gateway round trip
    if delay_seconds > 0:
        time.sleep(delay_seconds)

    try:
        p = repo.create(buyer_id=buyer.id, content_type=ref.content_type, content_id=ref.content_id)
    except SQLAlchemyError as e:
        raise CatalogWriteError(f"Error processing purchase: {db_error_text(e)}") from e
    log.info("purchase %s: %s bought %s %s for %.2f",
             p.id, buyer.id, ref.content_type.value, ref.content_id, price_for(ref.content_type))
    return p


def plan_details(row: Optional[PurchasableContent]) -> Optional[PlanDetails]:
    if row is None:
        return None
    return PlanDetails(
        title=row.title,
        description=row.description,
        author_name=row.author_name or UNKNOWN_AUTHOR,
    )


def purchase_history(
    db: Session, buyer_id: str, *, limit: Optional[int] = None, offset: int = 0
) -> list[PurchaseRead]:
    """The buyer's purchases, newest first, each joined to the content it points at."""
    repo = PurchaseRepository(db)
    purchases = repo.list_by_buyer(buyer_id, limit=limit, offset=offset)
    resolved = repo.resolve_many(ContentRef.of(p) for p in purchases)
    out = []
    for p in purchases:
        read = PurchaseRead.model_validate(p)
        read.details = plan_details(resolved[ContentRef.of(p)])
        out.append(read)
    return out


def describe(db: Session, p: Purchase) -> PurchaseRead:
    read = PurchaseRead.model_validate(p)
    read.details = plan_details(PurchaseRepository(db).resolve(ContentRef.of(p)))
    return read
