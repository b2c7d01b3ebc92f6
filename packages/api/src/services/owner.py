# This project was developed with assistance from AI tools.
"""Owner storage queries.

Thin data-access layer over the ``owners`` table. The search flow and the
routes only talk to storage through these functions; they never build
queries themselves.
"""

import logging
import math
from dataclasses import dataclass, field

from db import Owner, Pet
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

logger = logging.getLogger(__name__)

# Form fields copied onto the ORM object; ``id`` is never assignable.
_OWNER_FIELDS = ("first_name", "last_name", "address", "city", "telephone")


@dataclass
class OwnerPage:
    """One 0-based page of owners plus totals for the full result set."""

    items: list[Owner]
    total_elements: int
    page_index: int
    page_size: int
    total_pages: int = field(init=False)

    def __post_init__(self):
        self.total_pages = math.ceil(self.total_elements / self.page_size) if self.page_size else 0


def _last_name_filter(stmt, last_name: str):
    """Case-insensitive prefix match; an empty filter matches everything."""
    if last_name:
        stmt = stmt.where(Owner.last_name.istartswith(last_name, autoescape=True))
    return stmt


async def find_by_last_name(
    session: AsyncSession,
    last_name: str,
    *,
    page_index: int,
    page_size: int,
) -> OwnerPage:
    """Return the ``page_index`` window of owners whose last name starts with ``last_name``."""
    count_stmt = _last_name_filter(select(func.count(Owner.id)), last_name)
    total = (await session.execute(count_stmt)).scalar() or 0

    stmt = (
        select(Owner)
        .options(selectinload(Owner.pets))
        .order_by(Owner.last_name, Owner.id)
        .offset(page_index * page_size)
        .limit(page_size)
    )
    stmt = _last_name_filter(stmt, last_name)
    result = await session.execute(stmt)
    owners = list(result.unique().scalars().all())

    return OwnerPage(
        items=owners,
        total_elements=total,
        page_index=page_index,
        page_size=page_size,
    )


async def find_by_id(session: AsyncSession, owner_id: int) -> Owner | None:
    """Return an owner with pets, pet types and visits loaded, or None."""
    stmt = (
        select(Owner)
        .options(
            selectinload(Owner.pets).selectinload(Pet.type),
            selectinload(Owner.pets).selectinload(Pet.visits),
        )
        .where(Owner.id == owner_id)
    )
    result = await session.execute(stmt)
    return result.unique().scalar_one_or_none()


async def create_owner(session: AsyncSession, values: dict) -> Owner:
    """Insert a new owner from validated form values."""
    owner = Owner(**{k: values[k] for k in _OWNER_FIELDS})
    session.add(owner)
    await session.flush()
    owner_id = owner.id  # capture before commit expires the object
    await session.commit()
    # Re-query with eager loading to avoid lazy-load in async context
    return await find_by_id(session, owner_id)


async def update_owner(session: AsyncSession, owner_id: int, values: dict) -> Owner | None:
    """Overwrite an existing owner's form fields. Returns None if it does not exist."""
    owner = await find_by_id(session, owner_id)
    if owner is None:
        return None

    for name in _OWNER_FIELDS:
        setattr(owner, name, values[name])

    await session.commit()
    return await find_by_id(session, owner_id)
