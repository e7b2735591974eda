#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .builder import parse_file
from .db import PciDb
from .discovery import discover_db_path
from .errors import PciIdsError
from .tables import PciTables
from .types import Subsystem, TableKind, TableValue

log = logging.getLogger(__name__)


@dataclass
class ProgramArgs:
    db_path: Optional[str] = None
    table: Optional[str] = None
    lookup: Optional[str] = None
    class_code: Optional[str] = None
    verbose: bool = False


class TextEmitter:
    """Writes each table as ``0x<key>  <value>`` lines, keys ascending."""

    def __init__(self, only: Optional[TableKind] = None) -> None:
        self.only = only
        self.lines: List[str] = []

    def emit_table(
        self, kind: TableKind, items: Iterable[Tuple[int, TableValue]]
    ) -> None:
        if self.only is not None and kind is not self.only:
            return
        width = kind.hex_digits
        for key, value in items:
            if isinstance(value, Subsystem):
                self.lines.append(
                    f"0x{key:0{width}x}  0x{value.vendor:04x}  {value.name}"
                )
            else:
                self.lines.append(f"0x{key:0{width}x}  {value}")


def parse_hex_ids(text: str) -> List[int]:
    try:
        return [int(part, 16) for part in text.split(":")]
    except ValueError:
        raise ValueError(f"not a colon-separated list of hex ids: {text!r}") from None


def format_lookup(db: PciDb, ids: List[int]) -> str:
    if len(ids) == 2:
        ven, dev = ids
        return db.describe_device_best_effort(ven, dev, None)
    if len(ids) == 4:
        ven, dev, subven, subdev = ids
        name = db.get_subsystem_name(ven, dev, subven, subdev)
        base = db.describe_device_best_effort(ven, dev, None)
        return f"{base} ({name})" if name else base
    raise ValueError("expected VEN:DEV or VEN:DEV:SUBVEN:SUBDEV")


def run(args: ProgramArgs) -> int:
    try:
        path = discover_db_path(args.db_path)
        tables: PciTables = parse_file(path).unwrap()

        out_lines: List[str] = []
        if args.table:
            emitter = TextEmitter(TableKind.from_label(args.table))
            tables.emit(emitter)
            out_lines = emitter.lines
        elif args.lookup:
            out_lines.append(format_lookup(PciDb(tables), parse_hex_ids(args.lookup)))
        elif args.class_code:
            (code,) = parse_hex_ids(args.class_code)
            name = PciDb(tables).get_class_name_from_code(code)
            out_lines.append(name or f"Class {code:06x}")
        else:
            for label, count in tables.counts().items():
                out_lines.append(f"{label} {count}")
    except (PciIdsError, ValueError) as e:
        log.error("%s", e)
        return 1

    # Print in order
    for line in out_lines:
        print(line)
    return 0


def main(argv: Optional[List[str]] = None) -> None:  # pragma: no cover
    ap = argparse.ArgumentParser(
        description="Parse a pci.ids database into composite-key lookup tables"
    )
    ap.add_argument("--db", dest="db_path", default=None, help="path to pci.ids")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    action = ap.add_mutually_exclusive_group()
    action.add_argument(
        "--table",
        choices=[k.label for k in TableKind],
        help="dump one table in ascending key order",
    )
    action.add_argument(
        "--lookup", metavar="VEN:DEV[:SUBVEN:SUBDEV]", help="describe a device"
    )
    action.add_argument(
        "--class", dest="class_code", metavar="CODE", help="24-bit class code"
    )
    ns = ap.parse_args(argv)
    logging.basicConfig(
        format="pcidb: %(message)s",
        level=logging.DEBUG if ns.verbose else logging.WARNING,
    )
    sys.exit(run(ProgramArgs(**vars(ns))))


if __name__ == "__main__":  # pragma: no cover
    main()
