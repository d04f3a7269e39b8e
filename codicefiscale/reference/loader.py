"""Populate the nations and cities tables from the JSON exports.

The files can be obtained from
https://www.gardainformatica.it/database-comuni-italiani. Italy has no
Belfiore code in the nations export: it is stored with the sentinel "0000"
so the generator knows to use the city code instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from codicefiscale.encoders.tables import SENTINEL_NATION_CODE
from codicefiscale.models.city import City
from codicefiscale.models.nation import Nation
from codicefiscale.schemas.reference import LoadedCity, LoadedNation

logger = logging.getLogger(__name__)

_nations_adapter = TypeAdapter(list[LoadedNation])
_cities_adapter = TypeAdapter(list[LoadedCity])


def normalize_nation_code(code: str) -> str:
    """Replace an empty nation code with the sentinel."""
    code = code.strip()
    return code if code else SENTINEL_NATION_CODE


def load_nations(path: Path) -> list[Nation]:
    """Parse the nations export into (unsaved) Nation rows."""
    loaded = _nations_adapter.validate_json(path.read_bytes())
    return [
        Nation(nation_name=n.nation_name, nation_code=normalize_nation_code(n.nation_code))
        for n in loaded
    ]


def load_cities(path: Path) -> list[City]:
    """Parse the municipalities export into (unsaved) City rows."""
    loaded = _cities_adapter.validate_json(path.read_bytes())
    return [City(city_name=c.city_name, city_code=c.city_code.strip()) for c in loaded]


async def populate_db(db: AsyncSession, nations_path: Path, cities_path: Path) -> tuple[int, int]:
    """Replace the contents of both tables with the given exports.

    Both files are parsed before anything is written, so a broken file
    leaves the existing data untouched. The caller commits.

    Returns:
        (nations inserted, cities inserted)
    """
    nations = load_nations(nations_path)
    cities = load_cities(cities_path)

    await db.execute(delete(Nation))
    await db.execute(delete(City))
    db.add_all(nations)
    db.add_all(cities)
    await db.flush()

    logger.info("Loaded %d nations from %s", len(nations), nations_path)
    logger.info("Loaded %d cities from %s", len(cities), cities_path)
    return len(nations), len(cities)
