from pydantic import BaseModel

from fitmarket.schemas.advice import CategoryOption
from fitmarket.services.forms import FormState

class FormStatus(BaseModel):
    form: str
    state: FormState
    message: str | None = None
    categories: list[CategoryOption] = []
