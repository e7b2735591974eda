# pcidb/tables.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from .types import (
    Class,
    ClassSubclass,
    ClassSubclassProgrammingInterface,
    Emitter,
    Subsystem,
    TableKind,
    TableUpdate,
    TableValue,
    Vendor,
    VendorProduct,
    VendorProductSubsystem,
)


@dataclass
class PciTables:
    """
    The six exact-match mappings produced by one parse pass.

    Mappings only grow. A repeated key overwrites the earlier value.
    """

    classes: Dict[Class, str] = field(default_factory=dict)
    subclasses: Dict[ClassSubclass, str] = field(default_factory=dict)
    prog_ifs: Dict[ClassSubclassProgrammingInterface, str] = field(
        default_factory=dict
    )
    vendors: Dict[Vendor, str] = field(default_factory=dict)
    products: Dict[VendorProduct, str] = field(default_factory=dict)
    subsystems: Dict[VendorProductSubsystem, Subsystem] = field(
        default_factory=dict
    )

    def table(self, kind: TableKind) -> Dict[int, TableValue]:
        return getattr(self, kind.label)

    def apply(self, update: TableUpdate) -> None:
        self.table(update.table)[update.key] = update.value

    def sorted_items(self, kind: TableKind) -> Iterator[Tuple[int, TableValue]]:
        t = self.table(kind)
        for key in sorted(t):
            yield key, t[key]

    def counts(self) -> Dict[str, int]:
        return {kind.label: len(self.table(kind)) for kind in TableKind}

    def emit(self, emitter: Emitter) -> None:
        for kind in TableKind:
            emitter.emit_table(kind, self.sorted_items(kind))
