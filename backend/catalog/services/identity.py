"""Identity Resolution - bearer token → CallerIdentity.

Invariants:
    - Unknown tokens resolve to None; the caller decides to answer 401
    - Scopes are returned as a frozenset, ready for core/permissions.py
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import CallerIdentity
from catalog.models.access_token import AccessToken


async def resolve_identity(db: AsyncSession, token: str) -> CallerIdentity | None:
    result = await db.execute(
        select(AccessToken).where(AccessToken.token == token),
    )
    row = result.scalar_one_or_none()
    if row is None:
        return None
    return CallerIdentity(email=row.user_email, scopes=frozenset(row.scopes or ()))
