"""Reference data: nations and Italian cities with their Belfiore codes."""

from codicefiscale.reference.loader import populate_db
from codicefiscale.reference.store import (
    check_db_not_empty,
    ensure_database_file,
    resolve_location,
    search_city,
    search_nation,
)

__all__ = [
    "check_db_not_empty",
    "ensure_database_file",
    "populate_db",
    "resolve_location",
    "search_city",
    "search_nation",
]
