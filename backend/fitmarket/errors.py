# fitmarket/errors.py
"""Domain errors raised by services; routers map them to HTTP responses."""


class StorageError(Exception):
    """The object store refused an upload/remove. Message is the store's raw text."""


class InvalidSubmission(ValueError):
    """Input rejected before any storage or database call."""


class AssetRejected(InvalidSubmission):
    """An uploaded file failed the MIME type or size rules."""


class CatalogWriteError(Exception):
    """Inserting a catalog or ledger row failed after validation passed."""


class ContentNotFound(LookupError):
    def __init__(self, content_type: str, content_id: str):
        super().__init__(f"{content_type} {content_id} not found")
        self.content_type = content_type
        self.content_id = content_id
