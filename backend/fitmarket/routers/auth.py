from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from fitmarket.db import get_db
from fitmarket.models import User
from fitmarket.schemas.user import Token, UserRegister, UserLogin, UserRead
from fitmarket.security import hash_password, verify_password, create_access_token
from fitmarket.deps.auth import get_current_user, get_token_claims
from fitmarket.repositories.user_repo import RevokedTokenRepository, UserRepository

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    if repo.get_by_email(payload.email):
        raise HTTPException(status_code=400, detail="email already registered")
    try:
        user = repo.create(
            email=payload.email,
            name=payload.name,
            password_hash=hash_password(payload.password),
            role=payload.role,
        )
    except ValueError as e:
        if str(e) == "email_already_exists":
            raise HTTPException(status_code=400, detail="email already registered")
        raise
    return user

@router.post("/login", response_model=Token)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    user = repo.get_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=401, detail="invalid credentials")
    return Token(access_token=create_access_token(sub=user.id))

@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(get_current_user)):
    return current_user

@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    db: Session = Depends(get_db),
    claims: dict = Depends(get_token_claims),
    _current: User = Depends(get_current_user),
):
    if claims.get("jti"):
        RevokedTokenRepository(db).revoke(claims["jti"])
