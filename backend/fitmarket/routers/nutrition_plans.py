from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session
from fitmarket.db import get_db
from fitmarket.deps.auth import get_current_user, require_role
from fitmarket.deps.storage import get_storage
from fitmarket.models import User
from fitmarket.repositories.catalog_repo import NutritionPlanRepository
from fitmarket.routers.common import parse_form, service_errors
from fitmarket.schemas.nutrition_plan import NutritionPlanCreate, NutritionPlanRead
from fitmarket.services.assets import PLAN_DOCUMENT, read_upload
from fitmarket.services.forms import PublishForm
from fitmarket.services.gate import PUBLISH_NUTRITION
from fitmarket.services.publishing import publish_nutrition_plan
from fitmarket.storage import ObjectStorage

router = APIRouter(prefix="/nutrition-plans", tags=["nutrition-plans"])

@router.get("", response_model=list[NutritionPlanRead])
def list_plans(
    db: Session = Depends(get_db),
    _current: User = Depends(get_current_user),
    author_id: str | None = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    return NutritionPlanRepository(db).list(author_id=author_id, limit=limit, offset=offset)

@router.post("", response_model=NutritionPlanRead, status_code=status.HTTP_201_CREATED)
def create_plan(
    title: str = Form(""),
    description: str = Form(""),
    document: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    storage: ObjectStorage = Depends(get_storage),
    current: User = Depends(require_role(*PUBLISH_NUTRITION)),
):
    form = PublishForm.open("nutrition", current.role)

    payload = parse_form(NutritionPlanCreate, title=title, description=description)
    with service_errors("uploading file"):
        asset = read_upload(document, PLAN_DOCUMENT) if document is not None and document.filename else None
        return form.submit(
            payload.model_dump(),
            lambda: publish_nutrition_plan(db, storage, current, payload, asset),
        )
