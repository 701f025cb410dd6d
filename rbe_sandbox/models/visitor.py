"""SQLAlchemy model for the visit counter."""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from rbe_sandbox.database import Base


class VisitorCounter(Base):
    """Single-row table holding the visit count."""

    __tablename__ = "visitor_counters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
