# fitmarket/services/avatars.py
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from fitmarket.models import User
from fitmarket.repositories.user_repo import UserRepository
from fitmarket.services.assets import AVATAR_IMAGE, StoredAsset, UploadedAsset, discard, store
from fitmarket.services.publishing import insert_or_compensate
from fitmarket.storage import ObjectStorage

log = logging.getLogger(__name__)


def _own_avatar(storage: ObjectStorage, url: str | None) -> StoredAsset | None:
    """The stored object behind `url`, if it lives in our avatars bucket."""
    if not url:
        return None
    name = url.rsplit("/", 1)[-1]
    if storage.public_url(AVATAR_IMAGE.bucket, name) != url:
        return None
    return StoredAsset(bucket=AVATAR_IMAGE.bucket, name=name, url=url)


def replace_avatar(db: Session, storage: ObjectStorage, user: User, image: UploadedAsset) -> User:
    AVATAR_IMAGE.check(image)
    previous = _own_avatar(storage, user.avatar_url)
    stored = store(storage, AVATAR_IMAGE, image, prefix="avatar", owner_id=user.id)

    user = insert_or_compensate(
        lambda: UserRepository(db).set_avatar(user, avatar_url=stored.url),
        storage,
        stored,
        what="avatar",
    )
    if previous is not None:
        discard(storage, previous)
    log.info("avatar updated for %s", user.id)
    return user
