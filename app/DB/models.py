# Import all models here so Alembic can discover them
from app.DB.base import Base

# Users first (referenced by lists and attempts)
from app.features.users.models import User
from app.features.problems.models import Problem
from app.features.lists.models import ProblemList
from app.features.attempts.models import AttemptEntry

# This ensures all models are registered with SQLAlchemy
__all__ = [
	"Base",
	"User",
	"Problem",
	"ProblemList",
	"AttemptEntry",
]
