# fitmarket/storage.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path

from fitmarket.errors import StorageError
from fitmarket.settings import Settings

log = logging.getLogger(__name__)


class Bucket(str, Enum):
    avatars = "avatars"
    documents = "documents"
    videos = "videos"
    anatomy = "anatomy"


class ObjectStorage(ABC):
    """Bucketed blob store: upload by name, resolve a public URL, remove, list."""

    @abstractmethod
    def upload(self, bucket: Bucket, name: str, data: bytes, *, content_type: str) -> None: ...

    @abstractmethod
    def public_url(self, bucket: Bucket, name: str) -> str: ...

    @abstractmethod
    def remove(self, bucket: Bucket, names: list[str]) -> None: ...

    @abstractmethod
    def list(self, bucket: Bucket) -> list[str]: ...


class LocalObjectStorage(ObjectStorage):
    """Files under <root>/<bucket>/<name>; main.py serves <root> at /media."""

    def __init__(self, root: str | Path, public_base_url: str):
        self.root = Path(root)
        self.public_base_url = public_base_url.rstrip("/")

    def _path(self, bucket: Bucket, name: str) -> Path:
        # names are generated server-side, but never let one escape its bucket
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise StorageError(f"invalid object name: {name!r}")
        return self.root / bucket.value / name

    def upload(self, bucket: Bucket, name: str, data: bytes, *, content_type: str) -> None:
        path = self._path(bucket, name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # no upsert: an existing object is an error
            with path.open("xb") as fh:
                fh.write(data)
        except FileExistsError:
            raise StorageError(f"The resource already exists: {bucket.value}/{name}")
        except OSError as e:
            raise StorageError(str(e)) from e

    def public_url(self, bucket: Bucket, name: str) -> str:
        return f"{self.public_base_url}/{bucket.value}/{name}"

    def remove(self, bucket: Bucket, names: list[str]) -> None:
        for name in names:
            try:
                self._path(bucket, name).unlink(missing_ok=True)
            except OSError as e:
                raise StorageError(str(e)) from e

    def list(self, bucket: Bucket) -> list[str]:
        folder = self.root / bucket.value
        if not folder.is_dir():
            return []
        return sorted(p.name for p in folder.iterdir() if p.is_file())


class SupabaseObjectStorage(ObjectStorage):
    """Supabase Storage buckets, same names as `Bucket`."""

    def __init__(self, url: str, key: str):
        from supabase import create_client

        self.client = create_client(url, key)

    def upload(self, bucket: Bucket, name: str, data: bytes, *, content_type: str) -> None:
        try:
            self.client.storage.from_(bucket.value).upload(
                name,
                data,
                {"content-type": content_type, "cache-control": "3600", "upsert": "false"},
            )
        except Exception as e:  # storage3 raises its own error types; surface the raw text
            raise StorageError(str(e)) from e

    def public_url(self, bucket: Bucket, name: str) -> str:
        return self.client.storage.from_(bucket.value).get_public_url(name)

    def remove(self, bucket: Bucket, names: list[str]) -> None:
        try:
            self.client.storage.from_(bucket.value).remove(names)
        except Exception as e:
            raise StorageError(str(e)) from e

    def list(self, bucket: Bucket) -> list[str]:
        try:
            files = self.client.storage.from_(bucket.value).list()
        except Exception as e:
            raise StorageError(str(e)) from e
        return [f["name"] for f in files]


def build_storage(settings: Settings) -> ObjectStorage:
    if settings.STORAGE_BACKEND == "supabase":
        log.info("object storage: supabase %s", settings.SUPABASE_URL)
        return SupabaseObjectStorage(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    if settings.STORAGE_BACKEND != "local":
        raise RuntimeError(f"Unknown STORAGE_BACKEND {settings.STORAGE_BACKEND!r}")
    log.info("object storage: local directory %s", settings.STORAGE_ROOT)
    return LocalObjectStorage(settings.STORAGE_ROOT, settings.STORAGE_PUBLIC_URL)
