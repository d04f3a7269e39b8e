"""Exception hierarchy for code generation and reference-data lookups.

Every failure is terminal for the request that raised it: nothing is retried
and nothing is silently corrected.
"""

from __future__ import annotations


class CodiceFiscaleError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(CodiceFiscaleError):
    """Raised when person data cannot be encoded (non-ASCII, no letters, bad year...)."""


class LookupNotFoundError(CodiceFiscaleError):
    """Raised when a nation or city record is missing."""

    def __init__(self, kind: str, query: str | None = None) -> None:
        if query:
            message = f"{kind.capitalize()} not found: {query}"
        else:
            message = f"{kind.capitalize()} not found"
        super().__init__(message)
        self.kind = kind
        self.query = query


class MalformedCodeError(CodiceFiscaleError):
    """Raised when a fiscal code is not 16 uppercase letters and digits."""

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


class ReferenceDataError(CodiceFiscaleError):
    """Base class for problems with the nations/cities database."""


class DatabaseNotFoundError(ReferenceDataError):
    """The SQLite database file does not exist."""


class NationsTableEmptyError(ReferenceDataError):
    """The nations table has no rows."""

    def __init__(self) -> None:
        super().__init__("Nations table empty!")


class CitiesTableEmptyError(ReferenceDataError):
    """The cities table has no rows."""

    def __init__(self) -> None:
        super().__init__("Cities table empty!")
