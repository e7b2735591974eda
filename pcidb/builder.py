#!/usr/bin/python
#
# pcidb
# Single-pass pci.ids table builder
#
# (c) 2025 Steven Noonan
# Licensed under the MIT license
#

from __future__ import annotations
from dataclasses import dataclass
import logging
import os
from typing import Iterable, Optional, Union

from .errors import MalformedInput, PciIdsError, UnreadableInput
from .state import INITIAL_STATE, step
from .tables import PciTables

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Either ``tables`` or ``error`` is set, never both. No partial tables."""

    tables: Optional[PciTables] = None
    error: Optional[PciIdsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> PciTables:
        if self.error is not None:
            raise self.error
        assert self.tables is not None
        return self.tables


def parse_lines(lines: Iterable[str]) -> ParseResult:
    tables = PciTables()
    state = INITIAL_STATE
    try:
        for lineno, raw in enumerate(lines, start=1):
            state, update = step(state, raw.rstrip("\r\n"), lineno)
            if update is not None:
                tables.apply(update)
    except MalformedInput as e:
        return ParseResult(error=e)

    log.debug("parsed tables: %s", tables.counts())
    return ParseResult(tables=tables)


def parse_file(path: Union[str, os.PathLike]) -> ParseResult:
    p = str(path)
    try:
        f = open(p, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        err = UnreadableInput(p, e.strerror or str(e))
        err.__cause__ = e
        return ParseResult(error=err)

    log.debug("reading %s", p)
    with f:
        try:
            return parse_lines(f)
        except OSError as e:
            err = UnreadableInput(p, e.strerror or str(e))
            err.__cause__ = e
            return ParseResult(error=err)


def load(path: Union[str, os.PathLike]) -> PciTables:
    """parse_file() for callers that want the exception instead of a result."""
    return parse_file(path).unwrap()
