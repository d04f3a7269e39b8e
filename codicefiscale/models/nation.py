"""Nation model: birth nations with their Belfiore code."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from codicefiscale.models.base import Base

if TYPE_CHECKING:
    from codicefiscale.schemas.person import NationRecord


class Nation(Base):
    """A nation. Italy is stored with the sentinel code "0000"."""

    __tablename__ = "nations"

    id: Mapped[int] = mapped_column(primary_key=True)
    nation_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    nation_code: Mapped[str] = mapped_column(String(4), nullable=False)

    def to_record(self) -> NationRecord:
        """Detach the row into an immutable NationRecord."""
        from codicefiscale.schemas.person import NationRecord

        return NationRecord(name=self.nation_name, code=self.nation_code)

    def __repr__(self) -> str:
        return f"<Nation name={self.nation_name} code={self.nation_code}>"
