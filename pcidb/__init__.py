"""
pcidb: pci.ids text database -> composite-key lookup tables.

Public API:
    - Parsing:
        parse_lines, parse_file, load, ParseResult
    - Tables & records:
        PciTables, Subsystem, TableKind
    - Lookups:
        PciDb, open_db
    - Errors:
        PciIdsError, MalformedInput, MalformedLine, MalformedHexField,
        UnreadableInput
"""

from __future__ import annotations

# Version from installed dist; falls back to dev string when run from source tree.
try:
    from importlib.metadata import version, PackageNotFoundError
except Exception:  # pragma: no cover
    version = None  # type: ignore[assignment]
    PackageNotFoundError = Exception  # type: ignore[misc]

try:  # pragma: no cover
    __version__ = version("pcidb")
except (PackageNotFoundError, Exception):  # pragma: no cover
    __version__ = "0.0.0.dev0"

# Public API re-exports
from .api import PciDb, PciTables, ParseResult, load, open_db, parse_file, parse_lines
from .errors import (
    PciIdsError,
    MalformedInput,
    MalformedLine,
    MalformedHexField,
    UnreadableInput,
)
from .types import Subsystem, TableKind

__all__ = [
    "__version__",
    # Parsing
    "parse_lines",
    "parse_file",
    "load",
    "ParseResult",
    # Tables
    "PciTables",
    "Subsystem",
    "TableKind",
    # Lookups
    "PciDb",
    "open_db",
    # Errors
    "PciIdsError",
    "MalformedInput",
    "MalformedLine",
    "MalformedHexField",
    "UnreadableInput",
]
