from fastapi import HTTPException, Request, status
from jose import JWTError
from typing import Any, TypedDict

from .service import ACCESS_COOKIE_NAME, decode_access_token


async def _extract_bearer_or_cookie(request: Request) -> str | None:
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        return auth.removeprefix("Bearer ").strip()
    cookie = request.cookies.get(ACCESS_COOKIE_NAME)
    return cookie


class Claims(TypedDict, total=False):
    sub: str
    email: str
    exp: int


async def get_current_claims(request: Request) -> Claims:
    token = await _extract_bearer_or_cookie(request)
    if not token:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Missing token")
    try:
        claims: dict[str, Any] = decode_access_token(token)
    except JWTError:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid token") from None
    return claims  # type: ignore[return-value]
