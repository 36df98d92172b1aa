from fastapi import APIRouter, Depends, Response, status, HTTPException
from sqlalchemy.orm import Session

from app.DB.session import get_db
from app.common.deps import CurrentUser, get_current_user
from app.common.errors import ValidationError, to_http
from app.features.users.schemas import UserOut
from app.features.users.repository import user_repository
from .schemas import SignupRequest, LoginRequest, AuthResponse
from .service import signup, login, set_auth_cookie, clear_auth_cookie

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse)
def signup_endpoint(payload: SignupRequest, resp: Response, db: Session = Depends(get_db)):
    """Register, create the default list, and log in."""
    try:
        auth = signup(db, payload)
    except ValidationError as exc:
        raise to_http(exc) from None
    set_auth_cookie(resp, auth.access_token)
    return auth


@router.post("/login", response_model=AuthResponse, status_code=status.HTTP_200_OK)
def login_endpoint(payload: LoginRequest, resp: Response, db: Session = Depends(get_db)):
    """Authenticate user with JSON body (email, password)."""
    auth = login(db, payload)
    set_auth_cookie(resp, auth.access_token)  # HttpOnly cookie for browser clients
    return auth


@router.post("/logout", response_model=None)
def logout(resp: Response):
    clear_auth_cookie(resp)
    return {"detail": "Logged out"}


@router.get("/me", response_model=UserOut)
def me(current_user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    user = user_repository.get(db, current_user.id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
