from fastapi import APIRouter, Depends, HTTPException, status
from fitmarket.content import categories_for_role
from fitmarket.deps.auth import get_current_user
from fitmarket.models import User
from fitmarket.schemas.advice import CategoryOption
from fitmarket.schemas.form import FormStatus
from fitmarket.services.forms import FORM_CAPABILITIES, PublishForm

router = APIRouter(prefix="/forms", tags=["forms"])

@router.get("/{form_name}", response_model=FormStatus)
def open_form(form_name: str, current: User = Depends(get_current_user)):
    """Gate check for a publishing form. A denied role gets 200 with state "denied", never an error."""
    if form_name not in FORM_CAPABILITIES:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Form not found")
    form = PublishForm.open(form_name, current.role)
    categories = []
    if form_name == "advice" and not form.denied:
        categories = [CategoryOption(value=k, label=v) for k, v in categories_for_role(current.role).items()]
    return FormStatus(form=form_name, state=form.state, message=form.message, categories=categories)
