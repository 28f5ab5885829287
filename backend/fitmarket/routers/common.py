# fitmarket/routers/common.py
from contextlib import contextmanager
from typing import TypeVar

from fastapi import HTTPException, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from fitmarket.errors import CatalogWriteError, ContentNotFound, InvalidSubmission, StorageError

M = TypeVar("M", bound=BaseModel)

def parse_form(model: type[M], **fields) -> M:
    """Validate multipart form fields with the same schema a JSON body would use."""
    try:
        return model(**fields)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False))

@contextmanager
def service_errors(storage_action: str = "uploading file"):
    """Map domain errors to HTTP. Raw store/driver text is passed through to the caller."""
    try:
        yield
    except InvalidSubmission as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"Error {storage_action}: {e}")
    except CatalogWriteError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except ContentNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
