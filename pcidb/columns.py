#!/usr/bin/python
#
# pcidb
# pci.ids format columns
#
# (c) 2025 Steven Noonan
# Licensed under the MIT license
#

r"""
Fixed-column layouts of the pci.ids record lines.

Ids are zero-padded lowercase hex and the name starts a fixed number of
columns after the last id, so every field is a constant slice of the line:

    C 02  Network controller            class      [2,4)            name 6:
    0a89  BREA Technologies Inc         vendor     [0,4)            name 6:
    \t00  Ethernet controller           subclass   [1,3)            name 5:
    \t0002  PCI to MCA Bridge           product    [1,5)            name 7:
    \t\t00  UHCI                        prog_if    [2,4)            name 6:
    \t\t0e11 4091  Smart Array 6i       subsystem  [2,6) + [7,11)   name 13:
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .errors import MalformedHexField, MalformedLine

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class RecordKind(Enum):
    CLASS = "class"
    SUBCLASS = "subclass"
    PROG_IF = "prog_if"
    VENDOR = "vendor"
    PRODUCT = "product"
    SUBSYSTEM = "subsystem"


@dataclass(frozen=True)
class HexField:
    name: str
    start: int
    end: int

    @property
    def bits(self) -> int:
        return (self.end - self.start) * 4


@dataclass(frozen=True)
class LineLayout:
    kind: RecordKind
    fields: Tuple[HexField, ...]
    name_start: int


LAYOUTS: Dict[RecordKind, LineLayout] = {
    RecordKind.CLASS: LineLayout(RecordKind.CLASS, (HexField("class", 2, 4),), 6),
    RecordKind.SUBCLASS: LineLayout(
        RecordKind.SUBCLASS, (HexField("subclass", 1, 3),), 5
    ),
    RecordKind.PROG_IF: LineLayout(
        RecordKind.PROG_IF, (HexField("prog_if", 2, 4),), 6
    ),
    RecordKind.VENDOR: LineLayout(RecordKind.VENDOR, (HexField("vendor", 0, 4),), 6),
    RecordKind.PRODUCT: LineLayout(
        RecordKind.PRODUCT, (HexField("product", 1, 5),), 7
    ),
    RecordKind.SUBSYSTEM: LineLayout(
        RecordKind.SUBSYSTEM,
        (HexField("subvendor", 2, 6), HexField("subdevice", 7, 11)),
        13,
    ),
}


def parse_hex(field: HexField, line: str, lineno: int) -> int:
    text = line[field.start : field.end]
    # int(x, 16) also takes signs, whitespace, "_" and "0x"; the format doesn't
    if len(text) != field.end - field.start or not _HEX_DIGITS.issuperset(text):
        raise MalformedHexField(lineno, line, field.name, text)
    return int(text, 16)


def extract(
    layout: LineLayout, line: str, lineno: int
) -> Tuple[Tuple[int, ...], str]:
    """Slice ``line`` per ``layout`` -> (ids, name). The name may be empty."""
    if len(line) < layout.name_start:
        raise MalformedLine(lineno, line, layout.name_start)
    ids = tuple(parse_hex(f, line, lineno) for f in layout.fields)
    return ids, line[layout.name_start :]
