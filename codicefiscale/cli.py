"""Command-line entry point.

Usage:
    codicefiscale build-database
    codicefiscale generate Mario Rossi M Italia Roma 1980-04-25 [SUBSTITUTION_DEPTH]
    codicefiscale homocodic RSSMRA80D25H501P 2
    codicefiscale build-complete
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import date, datetime
from pathlib import Path

import click
import structlog
from pydantic import ValidationError

from codicefiscale.completion import write_completion_scripts, write_load_script
from codicefiscale.config import settings
from codicefiscale.db.engine import db_lifespan, get_session
from codicefiscale.encoders import generate_code, generate_homocodic_from_code
from codicefiscale.errors import CodiceFiscaleError
from codicefiscale.models.enums import Sex
from codicefiscale.reference import (
    check_db_not_empty,
    ensure_database_file,
    populate_db,
    resolve_location,
)
from codicefiscale.schemas.person import CityRecord, NationRecord

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# ── Logging setup ────────────────────────────────────────────────────


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog for a CLI run (logs go to stderr)."""
    level = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(getattr(logging, level))
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


# ── Helpers ──────────────────────────────────────────────────────────


def _ascii_only(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if not value.isascii():
        msg = "Data must be in ASCII format!"
        raise click.BadParameter(msg, ctx=ctx, param=param)
    return value


async def _resolve_birth_place(
    nation_name: str,
    city_name: str,
) -> tuple[NationRecord, CityRecord | None]:
    ensure_database_file()
    async with db_lifespan() as session_factory:
        async with session_factory() as db:
            await check_db_not_empty(db)
            return await resolve_location(db, nation_name, city_name)


async def _build_database(nations_path: Path, cities_path: Path) -> tuple[int, int]:
    async with db_lifespan() as session_factory:
        async with get_session(session_factory) as db:
            counts = await populate_db(db, nations_path, cities_path)
    return counts


# ── Commands ─────────────────────────────────────────────────────────


@click.group()
@click.version_option(package_name="codicefiscale")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL for this run.",
)
def cli(log_level: str | None) -> None:
    """Calculate a person's Italian fiscal code (codice fiscale)."""
    configure_logging(log_level)


@cli.command()
@click.argument("name", callback=_ascii_only)
@click.argument("surname", callback=_ascii_only)
@click.argument("sex", type=click.Choice([s.value for s in Sex], case_sensitive=False))
@click.argument("nation", callback=_ascii_only)
@click.argument("city", callback=_ascii_only)
@click.argument("birth_date", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.argument("substitution_depth", type=click.IntRange(min=0), required=False)
def generate(
    name: str,
    surname: str,
    sex: str,
    nation: str,
    city: str,
    birth_date: datetime,
    substitution_depth: int | None,
) -> None:
    """Generate the code.

    CITY is irrelevant if NATION is not Italy, but still needed.
    BIRTH_DATE is in format YYYY-MM-DD. SUBSTITUTION_DEPTH, if given,
    also prints the homocodic code.
    """
    born: date = birth_date.date()
    try:
        nation_record, city_record = asyncio.run(_resolve_birth_place(nation, city))
        code = generate_code(name, surname, Sex(sex.upper()), nation_record, city_record, born)
        click.echo(f"Code: {code}")
        if substitution_depth is not None:
            click.echo(f"Homocodic code: {generate_homocodic_from_code(code, substitution_depth)}")
    except CodiceFiscaleError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("code")
@click.argument("substitution_depth", type=click.IntRange(min=0))
def homocodic(code: str, substitution_depth: int) -> None:
    """Generate the homocodic version of an existing CODE."""
    try:
        result = generate_homocodic_from_code(code.strip().upper(), substitution_depth)
    except CodiceFiscaleError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Homocodic code: {result}")


@cli.command("build-database")
@click.option(
    "--nations",
    "nations_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=lambda: settings.reference.nations_file,
    show_default="gi_nazioni.json",
    help="Nations JSON export.",
)
@click.option(
    "--cities",
    "cities_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=lambda: settings.reference.cities_file,
    show_default="gi_comuni.json",
    help="Municipalities JSON export.",
)
def build_database(nations_path: Path, cities_path: Path) -> None:
    """Build the nations and city database."""
    try:
        nations_count, cities_count = asyncio.run(_build_database(nations_path, cities_path))
    except ValidationError as exc:
        msg = f"Invalid reference data file: {exc}"
        raise click.ClickException(msg) from exc
    logger.info("Inserted %d nations and %d cities", nations_count, cities_count)
    click.echo("Database successfully populated!")


@cli.command("build-complete")
def build_complete() -> None:
    """Build autocomplete scripts for all the supported shells and save them into the complete folder."""
    cfg = settings.completion
    for path in write_completion_scripts(cli, cfg.complete_dir, cfg.prog_name):
        click.echo(f"Generated complete file of {cfg.prog_name} for {path.suffix.lstrip('.')}")
    write_load_script(cfg.load_script, cfg.complete_dir, cfg.prog_name)
    click.echo("Generated load script")


def main() -> None:
    cli(prog_name=settings.completion.prog_name)


if __name__ == "__main__":
    main()
