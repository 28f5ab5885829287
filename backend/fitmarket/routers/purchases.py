from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from fitmarket.db import get_db
from fitmarket.deps.auth import get_current_user, require_role
from fitmarket.models import ContentType, User
from fitmarket.routers.common import service_errors
from fitmarket.schemas.purchase import CatalogItem, PurchaseCreate, PurchaseRead
from fitmarket.services import purchasing
from fitmarket.services.gate import PURCHASE
from fitmarket.settings import get_settings

router = APIRouter(prefix="/purchases", tags=["purchases"])

@router.get("", response_model=list[PurchaseRead])
def my_purchases(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    # without a limit the whole history is returned
    return purchasing.purchase_history(db, current.id, limit=limit, offset=offset)

@router.get("/catalog", response_model=list[CatalogItem])
def purchase_catalog(
    content_type: ContentType = Query(...),
    db: Session = Depends(get_db),
    _current: User = Depends(get_current_user),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    return purchasing.catalog(db, content_type, limit=limit, offset=offset)

@router.post("", response_model=PurchaseRead, status_code=status.HTTP_201_CREATED)
def buy(
    payload: PurchaseCreate,
    db: Session = Depends(get_db),
    current: User = Depends(require_role(*PURCHASE)),
):
    with service_errors():
        p = purchasing.purchase(db, current, payload, delay_seconds=get_settings().PURCHASE_DELAY_SECONDS)
    return purchasing.describe(db, p)
