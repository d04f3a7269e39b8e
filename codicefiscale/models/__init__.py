"""SQLAlchemy ORM models for the reference data.

Import all models here so Base.metadata.create_all() discovers them.
"""

from __future__ import annotations

from codicefiscale.models.base import Base
from codicefiscale.models.city import City
from codicefiscale.models.enums import Sex
from codicefiscale.models.nation import Nation

__all__ = [
    # Base
    "Base",
    # Models
    "Nation",
    "City",
    # Enums
    "Sex",
]
