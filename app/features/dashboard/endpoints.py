from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.DB.session import get_db
from app.common.deps import CurrentUser, get_current_user
from app.common.errors import to_http
from .schema import DashboardResponse
from .service import dashboard_service


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    scope: Optional[str] = Query(default="latest"),
    list_id: Optional[UUID] = Query(default=None, alias="listId"),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Progress snapshot for one list (latest/list) or every list on the canonical template (all)."""
    try:
        snapshot = dashboard_service.get_dashboard(db, current_user.id, scope, list_id)
    except ValueError as exc:
        raise to_http(exc) from None
    return DashboardResponse.model_validate(snapshot)
