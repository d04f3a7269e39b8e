"""Domain enums shared by the encoders, the schemas and the CLI.

All enums use str mixin so they serialize as their plain value.
"""

from __future__ import annotations

from enum import Enum


class Sex(str, Enum):
    """Sex as recorded in the code: drives the +40 day offset."""

    MALE = "M"
    FEMALE = "F"
