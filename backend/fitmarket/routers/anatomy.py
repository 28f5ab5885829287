from fastapi import APIRouter, Depends
from fitmarket.deps.auth import get_current_user
from fitmarket.deps.storage import get_storage
from fitmarket.models import User
from fitmarket.routers.common import service_errors
from fitmarket.schemas.anatomy import AnatomyImage, BodyPart
from fitmarket.services.anatomy import BODY_PARTS, anatomy_images
from fitmarket.storage import ObjectStorage

router = APIRouter(prefix="/anatomy", tags=["anatomy"])

@router.get("/images", response_model=list[AnatomyImage])
def list_images(
    storage: ObjectStorage = Depends(get_storage),
    _current: User = Depends(get_current_user),
):
    with service_errors("listing anatomy images"):
        return anatomy_images(storage)

@router.get("/body-parts", response_model=list[BodyPart])
def body_parts():
    return BODY_PARTS
