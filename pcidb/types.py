# pcidb/types.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, NamedTuple, Protocol, Tuple, Union

# Composite key aliases. All are plain ints; the names document the packing.
Class = int  # 8 bit
ClassSubclass = int  # class << 8 | subclass
ClassSubclassProgrammingInterface = int  # class_subclass << 8 | prog_if
Vendor = int  # 16 bit
VendorProduct = int  # vendor << 16 | product
VendorProductSubsystem = int  # vendor_product << 16 | subdevice


@dataclass(frozen=True)
class Subsystem:
    vendor: Vendor  # owner (sub)vendor as written on the line
    name: str


class TableKind(Enum):
    """The six mappings, in emission order. Value is the used key width in bits."""

    CLASSES = ("classes", 8)
    SUBCLASSES = ("subclasses", 16)
    PROG_IFS = ("prog_ifs", 24)
    VENDORS = ("vendors", 16)
    PRODUCTS = ("products", 32)
    SUBSYSTEMS = ("subsystems", 48)

    def __init__(self, label: str, key_bits: int) -> None:
        self.label = label
        self.key_bits = key_bits

    @property
    def hex_digits(self) -> int:
        return self.key_bits // 4

    @classmethod
    def from_label(cls, label: str) -> "TableKind":
        for kind in cls:
            if kind.label == label:
                return kind
        raise ValueError(f"unknown table: {label}")


TableValue = Union[str, Subsystem]


class TableUpdate(NamedTuple):
    table: TableKind
    key: int
    value: TableValue


class Emitter(Protocol):
    """Consumer of finished tables. Receives each table once, keys ascending."""

    def emit_table(
        self, kind: TableKind, items: Iterable[Tuple[int, TableValue]]
    ) -> None: ...


__all__ = [
    "Class",
    "ClassSubclass",
    "ClassSubclassProgrammingInterface",
    "Vendor",
    "VendorProduct",
    "VendorProductSubsystem",
    "Subsystem",
    "TableKind",
    "TableValue",
    "TableUpdate",
    "Emitter",
]
