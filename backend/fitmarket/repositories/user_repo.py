# fitmarket/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fitmarket.models import RevokedToken, User, UserRole
from fitmarket.repositories.base import BaseRepository, Page

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def list_community(
        self,
        *,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Page[User]:
        stmt = select(User)
        if search:
            stmt = stmt.where(func.lower(User.name).contains(search.lower(), autoescape=True))
        if role is not None:
            stmt = stmt.where(User.role == role)
        items = self.db.execute(
            stmt.order_by(User.created_at.desc()).limit(limit).offset(offset)
        ).scalars().all()
        total = self.db.execute(select(func.count()).select_from(stmt.subquery())).scalar_one()
        return Page(items=list(items), total=total, limit=limit, offset=offset)

    # WRITES
    def create(self, *, email: str, name: str, password_hash: str, role: UserRole) -> User:
        user = User(email=email, name=name, password_hash=password_hash, role=role)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            # Re-raise a clean marker the router maps to 400
            raise ValueError("email_already_exists")

    def set_avatar(self, user: User, *, avatar_url: Optional[str]) -> User:
        user.avatar_url = avatar_url
        return self.save(user)

class RevokedTokenRepository(BaseRepository[RevokedToken]):
    model = RevokedToken

    def is_revoked(self, jti: str) -> bool:
        return self.get(jti) is not None

    def revoke(self, jti: str) -> None:
        if not self.is_revoked(jti):
            self.save(RevokedToken(jti=jti))
