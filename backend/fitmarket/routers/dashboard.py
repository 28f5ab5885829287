from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from fitmarket.db import get_db
from fitmarket.deps.auth import get_current_user
from fitmarket.models import User
from fitmarket.schemas.dashboard import Dashboard
from fitmarket.services.dashboard import build_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get("", response_model=Dashboard)
def dashboard(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return build_dashboard(db, current)
