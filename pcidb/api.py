from __future__ import annotations
from typing import Optional
from .builder import ParseResult, load, parse_file, parse_lines
from .db import PciDb
from .tables import PciTables


def open_db(path: Optional[str] = None) -> PciDb:
    from .discovery import open_db as _open_db

    return _open_db(path)


__all__ = [
    "PciDb",
    "PciTables",
    "ParseResult",
    "load",
    "open_db",
    "parse_file",
    "parse_lines",
]
