from enum import Enum

from sqlalchemy import Column, Integer, String, UniqueConstraint, Index

from app.DB.base import Base


class Difficulty(str, Enum):
    easy = "Easy"
    medium = "Medium"
    hard = "Hard"


class Problem(Base):
    __tablename__ = "problems"
    __table_args__ = (
        UniqueConstraint("template_version", "neet250_id", name="uq_problems_template_neet"),
        UniqueConstraint("template_version", "order_index", name="uq_problems_template_order"),
        UniqueConstraint("template_version", "leetcode_slug", name="uq_problems_template_slug"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    template_version = Column(String(64), nullable=False)
    neet250_id = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    leetcode_slug = Column(String(255), nullable=False)
    category = Column(String(128), nullable=False)
    difficulty = Column(String(16), nullable=False)  # Difficulty value
    order_index = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Problem {self.template_version}#{self.neet250_id} order={self.order_index}>"


Index("ix_problems_template_category", Problem.template_version, Problem.category)
