# This project was developed with assistance from AI tools.
"""Owner search flow.

Given a last-name filter and a 1-based page number, query storage once and
decide what the caller should do:

- no owner matches: annotate the last-name field with ``notFound``
- exactly one owner matches: redirect to that owner
- several owners match: show one page of the listing

The decision is made on the total match count, never on the content of
the requested page. Storage errors propagate unchanged.
"""

import logging
from dataclasses import dataclass

from db import Owner
from sqlalchemy.ext.asyncio import AsyncSession

from .owner import find_by_last_name

logger = logging.getLogger(__name__)

PAGE_SIZE = 5


@dataclass
class OwnersNotFound:
    """No owner matched; the filter is kept so the form can be redisplayed."""

    last_name: str
    field: str = "last_name"
    error_kind: str = "notFound"
    message: str = "not found"


@dataclass
class SingleOwnerMatch:
    owner_id: int


@dataclass
class OwnerPageMatch:
    """More than one owner matched; ``owners`` is the requested page."""

    current_page: int
    total_pages: int
    total_items: int
    owners: list[Owner]
    page_size: int = PAGE_SIZE


SearchOutcome = OwnersNotFound | SingleOwnerMatch | OwnerPageMatch


async def search_owners(
    session: AsyncSession,
    *,
    page: int = 1,
    last_name: str | None = "",
) -> SearchOutcome:
    """Search owners by last-name prefix, one page at a time.

    Args:
        page: 1-based page number; translated to a 0-based index for storage.
        last_name: Filter; ``None`` or ``""`` matches every owner.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    last_name = last_name or ""

    results = await find_by_last_name(
        session, last_name, page_index=page - 1, page_size=PAGE_SIZE
    )

    if results.total_elements == 0:
        logger.info("No owners found for last name '%s'", last_name)
        return OwnersNotFound(last_name=last_name)

    if results.total_elements == 1:
        if not results.items:
            # Requested page is past the only match; fetch it from the first page
            results = await find_by_last_name(
                session, last_name, page_index=0, page_size=PAGE_SIZE
            )
            if not results.items:
                logger.info("Owner for last name '%s' disappeared between queries", last_name)
                return OwnersNotFound(last_name=last_name)
        owner = results.items[0]
        logger.info("One owner found for last name '%s': id=%s", last_name, owner.id)
        return SingleOwnerMatch(owner_id=owner.id)

    logger.info(
        "%s owners found for last name '%s'. Showing page %s of results",
        results.total_elements,
        last_name,
        page,
    )
    return OwnerPageMatch(
        current_page=page,
        total_pages=results.total_pages,
        total_items=results.total_elements,
        owners=results.items,
    )
