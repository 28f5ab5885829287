# fitmarket/services/assets.py
from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from pathlib import PurePath
from typing import BinaryIO, Optional, Protocol

from fitmarket.errors import AssetRejected, StorageError
from fitmarket.storage import Bucket, ObjectStorage

log = logging.getLogger(__name__)

MB = 1024 * 1024


class Upload(Protocol):
    """The bits of starlette's UploadFile we rely on."""
    filename: Optional[str]
    content_type: Optional[str]
    file: BinaryIO


@dataclass(frozen=True, slots=True)
class UploadedAsset:
    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True, slots=True)
class StoredAsset:
    bucket: Bucket
    name: str
    url: str


@dataclass(frozen=True, slots=True)
class AssetRule:
    bucket: Bucket
    label: str
    max_bytes: int
    mime_prefix: Optional[str] = None
    mime_exact: Optional[str] = None
    extension: Optional[str] = None   # forced extension for generated names
    fallback_extension: str = "bin"

    def accepts(self, mime: str) -> bool:
        if self.mime_exact is not None:
            return mime == self.mime_exact
        return mime.startswith(self.mime_prefix or "")

    def check(self, asset: UploadedAsset) -> None:
        if not self.accepts(asset.content_type):
            raise AssetRejected(f"Please select a valid {self.label} file")
        if asset.size > self.max_bytes:
            raise AssetRejected(f"File is too large. Maximum {self.max_bytes // MB}MB allowed")
        if asset.size == 0:
            raise AssetRejected(f"The selected {self.label} file is empty")

    def object_name(self, prefix: str, owner_id: str, filename: str) -> str:
        ext = self.extension or PurePath(filename).suffix.lstrip(".").lower() or self.fallback_extension
        return f"{prefix}-{owner_id}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}.{ext}"


AVATAR_IMAGE = AssetRule(Bucket.avatars, "image", 5 * MB, mime_prefix="image/", fallback_extension="png")
PLAN_DOCUMENT = AssetRule(Bucket.documents, "PDF", 10 * MB, mime_exact="application/pdf", extension="pdf")
WORKOUT_VIDEO = AssetRule(Bucket.videos, "video", 100 * MB, mime_prefix="video/", fallback_extension="mp4")


def read_upload(upload: Upload, rule: AssetRule) -> UploadedAsset:
    """Read at most one byte past the rule's ceiling, then apply the rule."""
    data = upload.file.read(rule.max_bytes + 1)
    asset = UploadedAsset(
        filename=upload.filename or "upload",
        content_type=upload.content_type or "application/octet-stream",
        data=data,
    )
    rule.check(asset)
    return asset


def store(storage: ObjectStorage, rule: AssetRule, asset: UploadedAsset, *, prefix: str, owner_id: str) -> StoredAsset:
    name = rule.object_name(prefix, owner_id, asset.filename)
    storage.upload(rule.bucket, name, asset.data, content_type=asset.content_type)
    return StoredAsset(bucket=rule.bucket, name=name, url=storage.public_url(rule.bucket, name))


def discard(storage: ObjectStorage, stored: StoredAsset) -> bool:
    """Single best-effort delete. A failure leaves an orphan, logged for offline cleanup."""
    try:
        storage.remove(stored.bucket, [stored.name])
    except StorageError as e:
        log.warning("orphaned asset bucket=%s name=%s error=%s", stored.bucket.value, stored.name, e)
        return False
    return True
