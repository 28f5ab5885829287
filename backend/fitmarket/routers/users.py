from __future__ import annotations
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from sqlalchemy.orm import Session
from fitmarket.db import get_db
from fitmarket.deps.auth import get_current_user
from fitmarket.deps.storage import get_storage
from fitmarket.models import User, UserRole
from fitmarket.repositories.user_repo import UserRepository
from fitmarket.routers.common import service_errors
from fitmarket.schemas.user import ProfileRead, UserRead
from fitmarket.services.assets import AVATAR_IMAGE, read_upload
from fitmarket.services.avatars import replace_avatar
from fitmarket.storage import ObjectStorage

router = APIRouter(prefix="/users", tags=["users"])
community_router = APIRouter(prefix="/community", tags=["community"])

@router.get("/me", response_model=UserRead)
def my_profile(current: User = Depends(get_current_user)):
    return current

@router.put("/me/avatar", response_model=UserRead)
def upload_avatar(
    image: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage: ObjectStorage = Depends(get_storage),
    current: User = Depends(get_current_user),
):
    with service_errors("uploading image"):
        asset = read_upload(image, AVATAR_IMAGE)
        return replace_avatar(db, storage, current, asset)

@router.get("/{user_id}", response_model=ProfileRead)
def get_user(
    user_id: str,
    db: Session = Depends(get_db),
    _current: User = Depends(get_current_user),
):
    user = UserRepository(db).get(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user

@community_router.get("", response_model=list[ProfileRead])
def list_community(
    db: Session = Depends(get_db),
    _current: User = Depends(get_current_user),
    search: str | None = Query(None, max_length=120),
    role: str = Query("all"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    if role == "all":
        role_filter = None
    else:
        try:
            role_filter = UserRole(role)
        except ValueError:
            raise HTTPException(status_code=422, detail=f"unknown role {role!r}")
    page = UserRepository(db).list_community(search=search, role=role_filter, limit=limit, offset=offset)
    return page.items
