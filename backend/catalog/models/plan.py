"""Plan ORM - persists resource plans keyed by name.

Invariants:
    - name is the primary key: the database enforces plan-name uniqueness
    - At most one row has is_default = true (partial unique index)
    - Rows are immutable once inserted: only insert and delete are issued

Design Decisions:
    - BigInteger for memory/swap: quotas are byte counts and exceed 2**31
    - Partial unique index over a service-level check: concurrent inserts of two
      default plans race at the database, not in Python
"""

from sqlalchemy import BigInteger, Boolean, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base import Base


class PlanModel(Base):
    """Resource plan row."""
    __tablename__ = "plans"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    memory: Mapped[int] = mapped_column(BigInteger, nullable=False)
    swap: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    cpu_share: Mapped[int] = mapped_column(Integer, nullable=False)
    is_default: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

    __table_args__ = (
        Index(
            "uq_plans_single_default", "is_default", unique=True,
            sqlite_where=text("is_default = 1"),
            postgresql_where=text("is_default"),
        ),
    )
