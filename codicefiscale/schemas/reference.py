"""Pydantic schemas for the gardainformatica.it reference data exports.

Field aliases follow the Italian keys of `gi_nazioni.json` and
`gi_comuni.json` (https://www.gardainformatica.it/database-comuni-italiani).
Only names and Belfiore codes end up in the database.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_EXPORT_CONFIG = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)


class LoadedNation(BaseModel):
    """A nation as in gi_nazioni.json."""

    model_config = _EXPORT_CONFIG

    nation_initials: str = Field(default="", alias="sigla_nazione")
    nation_code: str = Field(alias="codice_belfiore")  # empty for Italy
    nation_name: str = Field(alias="denominazione_nazione")
    citizen_name: str = Field(default="", alias="denominazione_cittadinanza")


class LoadedCity(BaseModel):
    """A municipality as in gi_comuni.json."""

    model_config = _EXPORT_CONFIG

    province_initials: str = Field(default="", alias="sigla_provincia")
    istat_code: str = Field(default="", alias="codice_istat")
    mixed_city_name: str = Field(default="", alias="denominazione_ita_altra")
    city_name: str = Field(alias="denominazione_ita")
    alternative_city_name: str = Field(default="", alias="denominazione_altra")
    is_province: str = Field(default="", alias="flag_capoluogo")
    city_code: str = Field(alias="codice_belfiore", pattern=r"^[A-Z0-9]{4}$")
    lat: str = ""
    lon: str = ""
    surface: str = Field(default="", alias="superficie_kmq")
    overmunicipal_code: str = Field(default="", alias="codice_sovracomunale")
