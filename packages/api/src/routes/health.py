# This project was developed with assistance from AI tools.
"""Liveness endpoint reporting API and database status."""

from db import DatabaseService, get_db_service
from fastapi import APIRouter, Depends

from .. import __version__
from ..schemas.health import HealthItem

router = APIRouter()


@router.get("/", response_model=list[HealthItem])
async def health(
    db_service: DatabaseService = Depends(get_db_service),
) -> list[HealthItem]:
    """Return one item for the API and one for the database."""
    db_health = await db_service.health_check()
    return [
        HealthItem(name="API", status="healthy", message="API is running", version=__version__),
        HealthItem(name="Database", **db_health),
    ]
