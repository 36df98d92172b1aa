from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from app.common.errors import NotFoundError, ValidationError
from app.features.problems.repository import problem_repository
from .models import ProblemList
from .repository import list_repository
from .schemas import CreateListRequest, RenameListRequest


class ListService:

    @staticmethod
    def create_list(db: Session, user_id: UUID, request: CreateListRequest) -> ProblemList:
        if not problem_repository.exists_template(db, request.template_version):
            raise ValidationError("Unknown template version")
        created = list_repository.create(db, user_id, request.name.strip(), request.template_version)
        db.commit()
        db.refresh(created)
        return created

    @staticmethod
    def list_lists(db: Session, user_id: UUID) -> List[ProblemList]:
        return list_repository.list_owned_by_user(db, user_id)

    @staticmethod
    def get_owned(db: Session, user_id: UUID, list_id: UUID) -> ProblemList:
        db_list = list_repository.find_owned(db, user_id, list_id)
        if not db_list:
            raise NotFoundError("List not found")
        return db_list

    @staticmethod
    def rename_list(db: Session, user_id: UUID, list_id: UUID, request: RenameListRequest) -> ProblemList:
        db_list = ListService.get_owned(db, user_id, list_id)
        list_repository.update(db, db_list, name=request.name.strip())
        db.commit()
        db.refresh(db_list)
        return db_list

    @staticmethod
    def deprecate_list(db: Session, user_id: UUID, list_id: UUID) -> ProblemList:
        db_list = ListService.get_owned(db, user_id, list_id)
        list_repository.update(db, db_list, deprecated=True)
        db.commit()
        db.refresh(db_list)
        return db_list
