# fitmarket/services/publishing.py
"""
Publishing workflow shared by the three catalogs.

Validated input -> optional asset upload -> catalog insert. There is no
transaction spanning the object store and the database: if the insert fails
after an upload, the uploaded object is deleted once (best effort) and the
insert error is raised.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitmarket.content import categories_for_role
from fitmarket.errors import CatalogWriteError, InvalidSubmission
from fitmarket.models import Advice, NutritionPlan, User, WorkoutContent
from fitmarket.repositories.catalog_repo import (
    AdviceRepository,
    NutritionPlanRepository,
    WorkoutRepository,
)
from fitmarket.schemas.advice import AdviceCreate
from fitmarket.schemas.nutrition_plan import NutritionPlanCreate
from fitmarket.schemas.workout import WorkoutCreate
from fitmarket.services.assets import (
    PLAN_DOCUMENT,
    WORKOUT_VIDEO,
    StoredAsset,
    UploadedAsset,
    discard,
    store,
)
from fitmarket.storage import ObjectStorage

log = logging.getLogger(__name__)

T = TypeVar("T")


def db_error_text(e: SQLAlchemyError) -> str:
    """The driver's message without SQLAlchemy's statement dump."""
    return str(getattr(e, "orig", None) or e)


def insert_or_compensate(
    insert: Callable[[], T],
    storage: ObjectStorage,
    stored: Optional[StoredAsset],
    *,
    what: str,
) -> T:
    try:
        return insert()
    except SQLAlchemyError as e:
        log.error("saving %s failed: %s", what, db_error_text(e))
        if stored is not None:
            discard(storage, stored)
        raise CatalogWriteError(f"Error saving {what}: {db_error_text(e)}") from e


def publish_workout(
    db: Session,
    storage: ObjectStorage,
    author: User,
    payload: WorkoutCreate,
    video: Optional[UploadedAsset] = None,
) -> WorkoutContent:
    if payload.video_url and video is not None:
        raise InvalidSubmission("Provide either a YouTube URL or a video file, not both")
    if not payload.video_url and video is None:
        raise InvalidSubmission("Please provide a YouTube URL or a video file")

    stored = None
    if video is not None:
        WORKOUT_VIDEO.check(video)
        stored = store(storage, WORKOUT_VIDEO, video, prefix="workout", owner_id=author.id)
    video_url = stored.url if stored else payload.video_url

    workout = insert_or_compensate(
        lambda: WorkoutRepository(db).create(
            author_id=author.id,
            title=payload.title,
            description=payload.description,
            video_url=video_url,
        ),
        storage,
        stored,
        what="workout",
    )
    log.info("workout %s published by %s", workout.id, author.id)
    return workout


def publish_nutrition_plan(
    db: Session,
    storage: ObjectStorage,
    author: User,
    payload: NutritionPlanCreate,
    document: Optional[UploadedAsset],
) -> NutritionPlan:
    if document is None:
        raise InvalidSubmission("Please select a PDF file")
    PLAN_DOCUMENT.check(document)
    stored = store(storage, PLAN_DOCUMENT, document, prefix="plan", owner_id=author.id)

    plan = insert_or_compensate(
        lambda: NutritionPlanRepository(db).create(
            author_id=author.id,
            title=payload.title,
            description=payload.description,
            document_url=stored.url,
        ),
        storage,
        stored,
        what="nutrition plan",
    )
    log.info("nutrition plan %s published by %s", plan.id, author.id)
    return plan


def publish_advice(db: Session, storage: ObjectStorage, author: User, payload: AdviceCreate) -> Advice:
    if payload.category is not None and payload.category not in categories_for_role(author.role):
        raise InvalidSubmission(f"Unknown category {payload.category!r}")

    advice = insert_or_compensate(
        lambda: AdviceRepository(db).create(
            author_id=author.id,
            title=payload.title,
            body=payload.body,
            video_url=payload.video_url,
            category=payload.category,
        ),
        storage,
        None,
        what="advice",
    )
    log.info("advice %s published by %s", advice.id, author.id)
    return advice
