from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.common.utils import current_timestamp
from .models import User


class UserRepository:
    """SQLAlchemy repository for users."""

    def get(self, db: Session, user_id: UUID) -> Optional[User]:
        return db.get(User, user_id)

    def find_by_email(self, db: Session, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email.strip().lower())
        return db.scalar(stmt)

    def create(self, db: Session, email: str, password_hash: str, timezone: str) -> User:
        now = current_timestamp()
        db_user = User(
            email=email.strip().lower(),
            password_hash=password_hash,
            timezone=timezone,
            created_at=now,
            updated_at=now,
        )
        db.add(db_user)
        db.flush()
        return db_user

user_repository = UserRepository()
