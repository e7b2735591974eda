# pcidb/errors.py
from __future__ import annotations
from typing import Optional


class PciIdsError(Exception):
    """Base class for everything pcidb raises on its own."""


class MalformedInput(PciIdsError, ValueError):
    """A line of the database could not be decoded. Fatal to the whole pass."""

    def __init__(self, message: str, lineno: int, line: str) -> None:
        super().__init__(f"line {lineno}: {message}: {line!r}")
        self.lineno = lineno
        self.line = line


class MalformedLine(MalformedInput):
    """Line is too short for the columns its shape requires."""

    def __init__(self, lineno: int, line: str, min_length: int) -> None:
        super().__init__(f"expected at least {min_length} columns", lineno, line)
        self.min_length = min_length


class MalformedHexField(MalformedInput):
    def __init__(self, lineno: int, line: str, field: str, text: str) -> None:
        super().__init__(f"bad hex in {field} field ({text!r})", lineno, line)
        self.field = field
        self.text = text


class UnreadableInput(PciIdsError):
    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        msg = f"cannot read pci.ids database {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.path = path


__all__ = [
    "PciIdsError",
    "MalformedInput",
    "MalformedLine",
    "MalformedHexField",
    "UnreadableInput",
]
