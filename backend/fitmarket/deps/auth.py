# fitmarket/deps/auth.py
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose.exceptions import ExpiredSignatureError, JWTError

from fitmarket.db import get_db
from fitmarket.models import User
from fitmarket.repositories.user_repo import RevokedTokenRepository
from fitmarket.security import decode_token
from fitmarket.services.gate import RESTRICTED_ACCESS, allows

# Exposes Bearer auth in Swagger; login endpoint issues the token
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

def get_token_claims(token: str = Depends(oauth2_scheme)) -> dict:
    try:
        return decode_token(token)
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

def get_current_user(
    db: Session = Depends(get_db),
    claims: dict = Depends(get_token_claims),
) -> User:
    """
    Resolves the bearer token to a user row. FastAPI caches dependencies per
    request, so handlers and role gates share one lookup.
    """
    unauth = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    sub = claims.get("sub")
    if sub is None:
        raise unauth
    jti = claims.get("jti")
    if jti and RevokedTokenRepository(db).is_revoked(jti):
        raise unauth
    user = db.get(User, str(sub))
    if not user:
        raise unauth
    return user

def require_role(*allowed_roles: str):
    """
    Usage: current: User = Depends(require_role("trainer", "nutritionist"))
    """
    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if not allows(current_user.role, allowed_roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=RESTRICTED_ACCESS,
            )
        return current_user
    return dependency
