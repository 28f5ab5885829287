from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session
from fitmarket.db import get_db
from fitmarket.deps.auth import get_current_user, require_role
from fitmarket.deps.storage import get_storage
from fitmarket.models import User
from fitmarket.repositories.catalog_repo import WorkoutRepository
from fitmarket.routers.common import parse_form, service_errors
from fitmarket.schemas.workout import WorkoutCreate, WorkoutRead
from fitmarket.services.assets import WORKOUT_VIDEO, read_upload
from fitmarket.services.forms import PublishForm
from fitmarket.services.gate import PUBLISH_WORKOUT
from fitmarket.services.publishing import publish_workout
from fitmarket.storage import ObjectStorage

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutRead])
def list_workouts(
    db: Session = Depends(get_db),
    _current: User = Depends(get_current_user),
    author_id: str | None = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    return WorkoutRepository(db).list(author_id=author_id, limit=limit, offset=offset)

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(
    title: str = Form(""),
    description: str = Form(""),
    video_url: str | None = Form(None),
    video: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    storage: ObjectStorage = Depends(get_storage),
    current: User = Depends(require_role(*PUBLISH_WORKOUT)),
):
    form = PublishForm.open("workout", current.role)

    payload = parse_form(WorkoutCreate, title=title, description=description, video_url=video_url)
    with service_errors("uploading video"):
        asset = read_upload(video, WORKOUT_VIDEO) if video is not None and video.filename else None
        return form.submit(
            payload.model_dump(),
            lambda: publish_workout(db, storage, current, payload, asset),
        )
