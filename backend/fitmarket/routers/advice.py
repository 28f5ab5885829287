from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from fitmarket.db import get_db
from fitmarket.deps.auth import get_current_user, require_role
from fitmarket.deps.storage import get_storage
from fitmarket.models import User
from fitmarket.repositories.catalog_repo import AdviceRepository
from fitmarket.routers.common import service_errors
from fitmarket.schemas.advice import AdviceCreate, AdviceRead
from fitmarket.services.forms import PublishForm
from fitmarket.services.gate import PUBLISH_ADVICE
from fitmarket.services.publishing import publish_advice
from fitmarket.storage import ObjectStorage

router = APIRouter(prefix="/advice", tags=["advice"])

@router.get("", response_model=list[AdviceRead])
def list_advice(
    db: Session = Depends(get_db),
    _current: User = Depends(get_current_user),
    author_id: str | None = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    return AdviceRepository(db).list(author_id=author_id, limit=limit, offset=offset)

@router.post("", response_model=AdviceRead, status_code=status.HTTP_201_CREATED)
def create_advice(
    payload: AdviceCreate,
    db: Session = Depends(get_db),
    storage: ObjectStorage = Depends(get_storage),
    current: User = Depends(require_role(*PUBLISH_ADVICE)),
):
    form = PublishForm.open("advice", current.role)

    with service_errors():
        return form.submit(
            payload.model_dump(),
            lambda: publish_advice(db, storage, current, payload),
        )
