"""ORM Models - SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from catalog.models.plan import PlanModel  # noqa: F401
from catalog.models.access_token import AccessToken  # noqa: F401
