"""City model: Italian municipalities with their Belfiore code."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from codicefiscale.models.base import Base

if TYPE_CHECKING:
    from codicefiscale.schemas.person import CityRecord


class City(Base):
    """An Italian municipality."""

    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(primary_key=True)
    city_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    city_code: Mapped[str] = mapped_column(String(4), nullable=False)

    def to_record(self) -> CityRecord:
        """Detach the row into an immutable CityRecord."""
        from codicefiscale.schemas.person import CityRecord

        return CityRecord(name=self.city_name, code=self.city_code)

    def __repr__(self) -> str:
        return f"<City name={self.city_name} code={self.city_code}>"
