#!/usr/bin/python
#
# pcidb
# Name lookups over parsed pci.ids tables
#
# (c) 2025 Steven Noonan
# Licensed under the MIT license
#

from __future__ import annotations
import os
from typing import Optional, Union

from .builder import load
from .keys import (
    class_subclass_key,
    prog_if_key,
    split_class_code,
    subsystem_key,
    vendor_product_key,
)
from .tables import PciTables


def _clamp(x: int, low: int, high: int) -> int:
    return max(low, min(x, high))


class PciDb:
    # Every lookup is a single dict probe on a composite key; no per-vendor
    # or per-class nesting is kept around.

    def __init__(self, tables: PciTables):
        if not tables.vendors and not tables.classes:
            raise ValueError("Corrupt or empty text database")
        self.tables = tables

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "PciDb":
        return cls(load(path))

    # ----- public API -----
    def get_vendor_name(self, vendor_id: int) -> Optional[str]:
        return self.tables.vendors.get(vendor_id & 0xFFFF)

    def get_device_name(self, vendor_id: int, device_id: int) -> Optional[str]:
        return self.tables.products.get(vendor_product_key(vendor_id, device_id))

    def get_subsystem_name(
        self, vendor_id: int, device_id: int, subvendor_id: int, subdevice_id: int
    ) -> Optional[str]:
        key = subsystem_key(vendor_product_key(vendor_id, device_id), subdevice_id)
        sub = self.tables.subsystems.get(key)
        # keyed by subdevice only; the owner vendor has to match too
        if sub is None or sub.vendor != (subvendor_id & 0xFFFF):
            return None
        return sub.name

    def get_class_name(
        self, base: int, subclass: Optional[int] = None, prog_if: Optional[int] = None
    ) -> Optional[str]:
        base &= 0xFF
        base_name = self.tables.classes.get(base)
        if subclass is None:
            return base_name

        cs = class_subclass_key(base, subclass)
        sub_name = self.tables.subclasses.get(cs)
        if sub_name is None:
            # unknown subclass → fall back to base only
            return base_name

        if prog_if is None:
            return sub_name

        # fall back to subclass name if specific prog-if not found
        return self.tables.prog_ifs.get(prog_if_key(cs, prog_if), sub_name)

    def get_class_name_from_code(
        self, class_code_24bit: int, depth: int = 3
    ) -> Optional[str]:
        base, sub, pi = split_class_code(class_code_24bit)
        depth = _clamp(depth, 0, 3)
        if depth > 2:
            name = self.get_class_name(base, sub, pi)
            if name is not None:
                return name
        if depth > 1:
            name = self.get_class_name(base, sub, None)
            if name is not None:
                return name
        return self.get_class_name(base, None, None)

    def describe_device_best_effort(
        self, vendor_id: int, device_id: int, class_code_24bit: Optional[int]
    ) -> str:
        dn = self.get_device_name(vendor_id, device_id)
        if dn:
            vn = self.get_vendor_name(vendor_id) or f"0x{vendor_id:04x}"
            return f"{vn} {dn}"
        vn = self.get_vendor_name(vendor_id)
        cn = self.get_class_name_from_code(class_code_24bit or 0, depth=2)
        vendor_part = vn if vn else f"0x{vendor_id:04x}"
        class_part = cn if cn else "PCI device"
        return f"Unknown {vendor_part} {class_part} (0x{device_id:04x})"

    def close(self) -> None:
        # nothing to release
        pass
