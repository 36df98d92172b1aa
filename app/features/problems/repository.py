from typing import Iterable, List

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from .models import Problem


class ProblemRepository:
    """Read side of the problem catalog, plus the one-off seeding insert."""

    def list_problems(self, db: Session, template_version: str) -> List[Problem]:
        stmt = (
            select(Problem)
            .where(Problem.template_version == template_version)
            .order_by(Problem.order_index.asc())
        )
        return list(db.scalars(stmt))

    def exists_template(self, db: Session, template_version: str) -> bool:
        stmt = select(Problem.id).where(Problem.template_version == template_version).limit(1)
        return db.scalar(stmt) is not None

    def exists_problem(self, db: Session, template_version: str, neet250_id: int) -> bool:
        stmt = (
            select(Problem.id)
            .where(Problem.template_version == template_version, Problem.neet250_id == neet250_id)
            .limit(1)
        )
        return db.scalar(stmt) is not None

    def count(self, db: Session, template_version: str) -> int:
        stmt = select(func.count()).select_from(Problem).where(Problem.template_version == template_version)
        return int(db.scalar(stmt) or 0)

    def bulk_insert(self, db: Session, problems: Iterable[Problem]) -> int:
        rows = list(problems)
        db.add_all(rows)
        db.flush()
        return len(rows)

problem_repository = ProblemRepository()
