"""Nation and city lookups against the reference database."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import func, select
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession

from codicefiscale.config import settings
from codicefiscale.encoders.tables import SENTINEL_NATION_CODE
from codicefiscale.errors import (
    CitiesTableEmptyError,
    DatabaseNotFoundError,
    LookupNotFoundError,
    NationsTableEmptyError,
)
from codicefiscale.models.city import City
from codicefiscale.models.nation import Nation
from codicefiscale.schemas.person import CityRecord, NationRecord

logger = logging.getLogger(__name__)

_MISSING_DATABASE_HELP = (
    "A database with all nations and cities is needed.\n"
    "Create one using the build-database command and set the DATABASE_URL "
    "environment variable to the database path.\n"
    "If the database is data.db in the current directory, the variable can be omitted."
)


def ensure_database_file(database_url: str | None = None) -> None:
    """Fail early when the SQLite file is missing (connecting would create it).

    Raises:
        DatabaseNotFoundError: With instructions on how to build it.
    """
    url = make_url(database_url or settings.db.database_url)
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return
    if not Path(url.database).is_file():
        raise DatabaseNotFoundError(_MISSING_DATABASE_HELP)


async def check_db_not_empty(db: AsyncSession) -> None:
    """Check that both reference tables have been populated."""
    cities_count = await db.scalar(select(func.count()).select_from(City))
    if not cities_count:
        raise CitiesTableEmptyError()
    nations_count = await db.scalar(select(func.count()).select_from(Nation))
    if not nations_count:
        raise NationsTableEmptyError()


async def search_nation(db: AsyncSession, name: str, limit: int | None = None) -> list[Nation]:
    """Search nations whose name matches `name` (SQL LIKE, `%` wildcards allowed)."""
    stmt = (
        select(Nation)
        .where(Nation.nation_name.like(name))
        .order_by(Nation.id)
        .limit(limit or settings.reference.search_limit)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def search_city(db: AsyncSession, name: str, limit: int | None = None) -> list[City]:
    """Search Italian cities whose name matches `name` (SQL LIKE)."""
    stmt = (
        select(City)
        .where(City.city_name.like(name))
        .order_by(City.id)
        .limit(limit or settings.reference.search_limit)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def resolve_location(
    db: AsyncSession,
    nation_name: str,
    city_name: str,
) -> tuple[NationRecord, CityRecord | None]:
    """Resolve the birth place, taking the first match of each search.

    The city is only required when the nation is the "0000" sentinel
    (born in Italy); otherwise a missing city resolves to None.

    Raises:
        LookupNotFoundError: If the nation, or a required city, is not found.
    """
    nations = await search_nation(db, nation_name)
    if not nations:
        raise LookupNotFoundError("nation", nation_name)
    nation = nations[0].to_record()

    cities = await search_city(db, city_name)
    if cities:
        logger.debug("Resolved birth place %s / %s", nation.name, cities[0].city_name)
        return nation, cities[0].to_record()

    if nation.code == SENTINEL_NATION_CODE:
        raise LookupNotFoundError("city", city_name)
    return nation, None
