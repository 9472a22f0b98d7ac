"""AccessToken ORM - maps opaque bearer tokens to a caller and its scopes.

Invariants:
    - token is the primary key (one identity per token)
    - scopes is a JSON list of dotted permission scopes

Design Decisions:
    - Tokens are issued by an external identity service; this table is the
      read model the API checks bearer tokens against
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base import Base


class AccessToken(Base):
    """Bearer token row."""
    __tablename__ = "access_tokens"

    token: Mapped[str] = mapped_column(String(128), primary_key=True)
    user_email: Mapped[str] = mapped_column(String(255), nullable=False)
    scopes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
