from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.DB.session import get_db
from app.common.deps import CurrentUser, get_current_user
from app.common.errors import to_http
from .schemas import ProblemWithLatestAttempt
from .service import list_with_latest_attempt

router = APIRouter(prefix="/lists", tags=["problems"])


@router.get("/{list_id}/problems", response_model=List[ProblemWithLatestAttempt])
def list_problems(
    list_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Catalog for the list's template, in solving order, with the current attempt per problem."""
    try:
        return list_with_latest_attempt(db, current_user.id, list_id)
    except ValueError as exc:
        raise to_http(exc) from None
