"""Local credential checks and HS256 access tokens."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any
from uuid import UUID

from fastapi import HTTPException, Response, status
from jose import jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.Core.config import get_settings
from app.common.errors import ValidationError
from app.common.utils import current_timestamp, load_zone, normalize_nullable
from app.features.lists.repository import list_repository
from app.features.users.models import User
from app.features.users.repository import user_repository
from .schemas import AuthResponse, LoginRequest, SignupRequest

settings = get_settings()
logger = logging.getLogger("auth.service")

ACCESS_COOKIE_NAME = "access_token"
COOKIE_DOMAIN = settings.cookie_domain
COOKIE_SECURE = settings.cookie_secure
SAMESITE = settings.cookie_samesite

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_access_token(user_id: UUID, email: str) -> str:
    now = current_timestamp()
    claims: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=settings.jwt_expiration_seconds)).timestamp()),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry; raises jose.JWTError on failure."""
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        access_token=create_access_token(user.id, user.email),
        expires_in_seconds=settings.jwt_expiration_seconds,
        user_id=user.id,
        email=user.email,
        timezone=user.timezone,
    )


def signup(db: Session, request: SignupRequest) -> AuthResponse:
    """Create the user and their default list in one transaction."""
    if user_repository.find_by_email(db, request.email):
        raise ValidationError("Email already exists")
    timezone = normalize_nullable(request.timezone) or settings.default_timezone
    try:
        load_zone(timezone)
    except ValueError as exc:
        raise ValidationError(str(exc)) from None
    user = user_repository.create(db, request.email, hash_password(request.password), timezone)
    list_repository.create(db, user.id, settings.default_list_name, settings.default_template_version)
    db.commit()
    db.refresh(user)
    logger.info("auth.signup user_id=%s", user.id)
    return _auth_response(user)


def login(db: Session, request: LoginRequest) -> AuthResponse:
    user = user_repository.find_by_email(db, request.email)
    if not user or not verify_password(request.password, user.password_hash):
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid credentials")
    return _auth_response(user)


def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        ACCESS_COOKIE_NAME,
        token,
        max_age=settings.jwt_expiration_seconds,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite=SAMESITE.lower(),
        domain=COOKIE_DOMAIN,
        path="/",
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(ACCESS_COOKIE_NAME, domain=COOKIE_DOMAIN, path="/")
