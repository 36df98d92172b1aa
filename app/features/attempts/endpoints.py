from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.DB.session import get_db
from app.common.deps import CurrentUser, get_current_user
from app.common.errors import to_http
from .schemas import AttemptResponse, UpsertAttemptRequest
from . import service

router = APIRouter(tags=["attempts"])


@router.post("/lists/{list_id}/problems/{neet_id}/attempts", response_model=AttemptResponse)
def create_attempt(
    list_id: UUID,
    neet_id: int,
    payload: UpsertAttemptRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Record a new attempt; earlier attempts for the problem are kept as history."""
    try:
        return service.create_attempt(db, current_user.id, list_id, neet_id, payload)
    except ValueError as exc:
        raise to_http(exc) from None


@router.get("/lists/{list_id}/problems/{neet_id}/attempts", response_model=List[AttemptResponse])
def attempt_history(
    list_id: UUID,
    neet_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return service.attempt_history(db, current_user.id, list_id, neet_id)
    except ValueError as exc:
        raise to_http(exc) from None


@router.patch("/attempts/{attempt_id}", response_model=AttemptResponse)
def update_attempt(
    attempt_id: UUID,
    payload: UpsertAttemptRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Correct an existing entry in place (same id)."""
    try:
        return service.update_attempt(db, current_user.id, attempt_id, payload)
    except ValueError as exc:
        raise to_http(exc) from None


@router.delete("/attempts/{attempt_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_attempt(
    attempt_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        service.delete_attempt(db, current_user.id, attempt_id)
    except ValueError as exc:
        raise to_http(exc) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)
