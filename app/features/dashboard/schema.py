from datetime import datetime
from typing import List, Optional
from uuid import UUID

from app.common.schemas import CamelModel
from .scope import DashboardScope


class ProblemSummary(CamelModel):
    neet250_id: int
    order_index: int
    title: str
    category: str
    difficulty: str


class CategorySolvedOut(CamelModel):
    category: str
    solved_count: int
    total_in_category: int
    easy_solved: int
    medium_solved: int
    hard_solved: int


class CategoryAvgTimeOut(CamelModel):
    category: str
    avg_time_minutes: float


class DashboardResponse(CamelModel):
    scope: DashboardScope
    template_version: Optional[str] = None
    resolved_list_id: Optional[UUID] = None
    latest_list_id: Optional[UUID] = None
    list_id: Optional[UUID] = None
    last_activity_at: Optional[datetime] = None
    farthest_solved: Optional[ProblemSummary] = None
    latest_solved_panel: List[ProblemSummary] = []
    next_unsolved_panel: List[ProblemSummary] = []
    total_solved: int = 0
    per_category: List[CategorySolvedOut] = []
    overall_avg_time_minutes: Optional[float] = None
    per_category_avg_time_minutes: List[CategoryAvgTimeOut] = []
    current_streak: int = 0
    average_streak: float = 0.0
    longest_streak: int = 0
