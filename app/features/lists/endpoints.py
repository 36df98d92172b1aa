"""Endpoints for managing a user's problem lists."""

from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.DB.session import get_db
from app.common.deps import CurrentUser, get_current_user
from app.common.errors import to_http
from .schemas import CreateListRequest, ListResponse, RenameListRequest
from .service import ListService


router = APIRouter(prefix="/lists", tags=["lists"])


@router.post("", response_model=ListResponse)
def create_list(
    payload: CreateListRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ListResponse:
    try:
        return ListService.create_list(db, current_user.id, payload)
    except ValueError as exc:
        raise to_http(exc) from None


@router.get("", response_model=List[ListResponse])
def list_lists(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> List[ListResponse]:
    return ListService.list_lists(db, current_user.id)


@router.patch("/{list_id}", response_model=ListResponse)
def rename_list(
    list_id: UUID,
    payload: RenameListRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ListResponse:
    try:
        return ListService.rename_list(db, current_user.id, list_id, payload)
    except ValueError as exc:
        raise to_http(exc) from None


@router.post("/{list_id}/deprecate", response_model=ListResponse)
def deprecate_list(
    list_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ListResponse:
    try:
        return ListService.deprecate_list(db, current_user.id, list_id)
    except ValueError as exc:
        raise to_http(exc) from None
