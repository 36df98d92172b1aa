from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.common.utils import current_timestamp
from .models import ProblemList


class ListRepository:

    def find_owned(self, db: Session, user_id: UUID, list_id: UUID) -> Optional[ProblemList]:
        stmt = select(ProblemList).where(ProblemList.id == list_id, ProblemList.user_id == user_id)
        return db.scalar(stmt)

    def list_owned_by_user(self, db: Session, user_id: UUID) -> List[ProblemList]:
        """All lists of a user, most recently updated first."""
        stmt = (
            select(ProblemList)
            .where(ProblemList.user_id == user_id)
            .order_by(ProblemList.updated_at.desc(), ProblemList.id.desc())
        )
        return list(db.scalars(stmt))

    def create(self, db: Session, user_id: UUID, name: str, template_version: str) -> ProblemList:
        now = current_timestamp()
        db_list = ProblemList(
            user_id=user_id,
            name=name,
            template_version=template_version,
            deprecated=False,
            created_at=now,
            updated_at=now,
        )
        db.add(db_list)
        db.flush()
        return db_list

    def update(self, db: Session, db_list: ProblemList, **fields) -> ProblemList:
        for key, value in fields.items():
            setattr(db_list, key, value)
        db_list.updated_at = current_timestamp()
        db.flush()
        return db_list

list_repository = ListRepository()
