#!/usr/bin/python
#
# pcidb
# pci.ids line classifier and context tracker
#
# (c) 2025 Steven Noonan
# Licensed under the MIT license
#

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from .columns import LAYOUTS, RecordKind, extract
from .keys import class_subclass_key, prog_if_key, subsystem_key, vendor_product_key
from .types import Subsystem, TableKind, TableUpdate

CLASS_MARKER = "C"
COMMENT_MARKER = "#"
INDENT = "\t"


class LineShape(Enum):
    BLANK = "blank"  # empty or comment
    CLASS_HEADER = "class-header"
    VENDOR_HEADER = "vendor-header"
    SINGLE_INDENT = "single-indent"
    DOUBLE_INDENT = "double-indent"


def classify(line: str) -> LineShape:
    if not line or line[0] == COMMENT_MARKER:
        return LineShape.BLANK
    if line[0] == CLASS_MARKER:
        return LineShape.CLASS_HEADER
    if line[0] != INDENT:
        return LineShape.VENDOR_HEADER
    if len(line) == 1 or line[1] != INDENT:
        return LineShape.SINGLE_INDENT
    return LineShape.DOUBLE_INDENT


@dataclass(frozen=True)
class ParseState:
    """Mode flag plus the four context registers. Never mutated; see step()."""

    in_class_block: bool = False
    cur_class: int = 0
    cur_class_subclass: int = 0
    cur_vendor: int = 0
    cur_vendor_product: int = 0


INITIAL_STATE = ParseState()


def record_kind(shape: LineShape, in_class_block: bool) -> Optional[RecordKind]:
    """Indentation alone is ambiguous; the mode picks the hierarchy."""
    if shape is LineShape.CLASS_HEADER:
        return RecordKind.CLASS
    if shape is LineShape.VENDOR_HEADER:
        return RecordKind.VENDOR
    if shape is LineShape.SINGLE_INDENT:
        return RecordKind.SUBCLASS if in_class_block else RecordKind.PRODUCT
    if shape is LineShape.DOUBLE_INDENT:
        return RecordKind.PROG_IF if in_class_block else RecordKind.SUBSYSTEM
    return None


def step(
    state: ParseState, line: str, lineno: int = 0
) -> Tuple[ParseState, Optional[TableUpdate]]:
    """
    Consume one line (without its newline).

    Returns the next state and the table insertion the line produces, or
    (state, None) for blank and comment lines. Raises MalformedLine or
    MalformedHexField; ``lineno`` is only used for those messages.
    """
    kind = record_kind(classify(line), state.in_class_block)
    if kind is None:
        return state, None

    ids, name = extract(LAYOUTS[kind], line, lineno)

    if kind is RecordKind.CLASS:
        (cls,) = ids
        nxt = replace(state, in_class_block=True, cur_class=cls)
        return nxt, TableUpdate(TableKind.CLASSES, cls, name)

    if kind is RecordKind.VENDOR:
        (ven,) = ids
        nxt = replace(state, in_class_block=False, cur_vendor=ven)
        return nxt, TableUpdate(TableKind.VENDORS, ven, name)

    if kind is RecordKind.SUBCLASS:
        key = class_subclass_key(state.cur_class, ids[0])
        nxt = replace(state, cur_class_subclass=key)
        return nxt, TableUpdate(TableKind.SUBCLASSES, key, name)

    if kind is RecordKind.PRODUCT:
        key = vendor_product_key(state.cur_vendor, ids[0])
        nxt = replace(state, cur_vendor_product=key)
        return nxt, TableUpdate(TableKind.PRODUCTS, key, name)

    if kind is RecordKind.PROG_IF:
        key = prog_if_key(state.cur_class_subclass, ids[0])
        return state, TableUpdate(TableKind.PROG_IFS, key, name)

    # Subsystem: the owner vendor comes from the line and may differ from cur_vendor
    subven, subdev = ids
    key = subsystem_key(state.cur_vendor_product, subdev)
    return state, TableUpdate(TableKind.SUBSYSTEMS, key, Subsystem(subven, name))
