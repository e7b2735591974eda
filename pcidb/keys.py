# pcidb/keys.py
"""
Composite key packing.

Each level of the hierarchy is appended to its parent's key by shifting the
parent left by the child's field width and or-ing the child in. Keys are
therefore unique per path and ordered by (parent, child).
"""

from __future__ import annotations
from typing import Tuple

from .types import (
    ClassSubclass,
    ClassSubclassProgrammingInterface,
    VendorProduct,
    VendorProductSubsystem,
)


def _pack(parent: int, child: int, bits: int) -> int:
    return (parent << bits) | (child & ((1 << bits) - 1))


def class_subclass_key(class_id: int, subclass_id: int) -> ClassSubclass:
    return _pack(class_id & 0xFF, subclass_id, 8)


def prog_if_key(
    class_subclass: ClassSubclass, prog_if: int
) -> ClassSubclassProgrammingInterface:
    return _pack(class_subclass & 0xFFFF, prog_if, 8)


def vendor_product_key(vendor_id: int, product_id: int) -> VendorProduct:
    return _pack(vendor_id & 0xFFFF, product_id, 16)


def subsystem_key(
    vendor_product: VendorProduct, subdevice_id: int
) -> VendorProductSubsystem:
    return _pack(vendor_product & 0xFFFFFFFF, subdevice_id, 16)


def split_class_code(class_code_24bit: int) -> Tuple[int, int, int]:
    """24-bit config-space class code -> (base, subclass, prog_if)."""
    return (
        (class_code_24bit >> 16) & 0xFF,
        (class_code_24bit >> 8) & 0xFF,
        class_code_24bit & 0xFF,
    )

