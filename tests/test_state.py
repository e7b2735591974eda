# tests/test_state.py
from __future__ import annotations
import pytest

from pcidb.columns import LAYOUTS, RecordKind, extract
from pcidb.errors import MalformedHexField, MalformedLine
from pcidb.state import INITIAL_STATE, LineShape, ParseState, classify, step
from pcidb.types import Subsystem, TableKind, TableUpdate


@pytest.mark.parametrize(
    "line, shape",
    [
        ("", LineShape.BLANK),
        ("# comment", LineShape.BLANK),
        ("#\tindented comment", LineShape.BLANK),
        ("C 02  Network controller", LineShape.CLASS_HEADER),
        ("0a89  BREA Technologies Inc", LineShape.VENDOR_HEADER),
        ("\t0002  PCI to MCA Bridge", LineShape.SINGLE_INDENT),
        ("\t00  Ethernet controller", LineShape.SINGLE_INDENT),
        ("\t", LineShape.SINGLE_INDENT),
        ("\t\t0e11 4091  Smart Array 6i", LineShape.DOUBLE_INDENT),
        ("\t\t00  UHCI", LineShape.DOUBLE_INDENT),
    ],
)
def test_classify(line, shape):
    assert classify(line) is shape


def test_initial_state_is_vendor_mode_with_zero_registers():
    assert INITIAL_STATE == ParseState(False, 0, 0, 0, 0)


def test_blank_lines_do_not_touch_state():
    s = ParseState(True, 0x02, 0x0200, 0x8086, 0x80861237)
    assert step(s, "") == (s, None)
    assert step(s, "# C 03  not a class") == (s, None)


def test_class_header():
    s, upd = step(INITIAL_STATE, "C 02  Network controller")
    assert s.in_class_block
    assert s.cur_class == 0x02
    assert upd == TableUpdate(TableKind.CLASSES, 0x02, "Network controller")


def test_class_header_name_is_exact_trailing_text():
    _, upd = step(INITIAL_STATE, "C ff  Unassigned class  ")
    assert upd.value == "Unassigned class  "


def test_vendor_header_leaves_class_mode():
    s = ParseState(in_class_block=True, cur_class=0x0C)
    s, upd = step(s, "8086  Intel Corporation")
    assert not s.in_class_block
    assert s.cur_vendor == 0x8086
    # class register is not cleared by a vendor header
    assert s.cur_class == 0x0C
    assert upd == TableUpdate(TableKind.VENDORS, 0x8086, "Intel Corporation")


def test_single_indent_depends_on_mode():
    in_class = ParseState(in_class_block=True, cur_class=0x02)
    s, upd = step(in_class, "\t80  Network controller")
    assert upd == TableUpdate(TableKind.SUBCLASSES, 0x0280, "Network controller")
    assert s.cur_class_subclass == 0x0280

    in_vendor = ParseState(cur_vendor=0x0A89)
    s, upd = step(in_vendor, "\t0002  PCI to MCA Bridge")
    assert upd == TableUpdate(TableKind.PRODUCTS, 0x0A890002, "PCI to MCA Bridge")
    assert s.cur_vendor_product == 0x0A890002


def test_double_indent_depends_on_mode():
    s0 = ParseState(in_class_block=True, cur_class=0x0C, cur_class_subclass=0x0C03)
    s, upd = step(s0, "\t\t30  XHCI")
    assert s == s0
    assert upd == TableUpdate(TableKind.PROG_IFS, 0x0C0330, "XHCI")

    s0 = ParseState(cur_vendor=0x0E11, cur_vendor_product=0x0E11B060)
    s, upd = step(s0, "\t\t0e11 4091  Smart Array 6i")
    assert s == s0
    assert upd == TableUpdate(
        TableKind.SUBSYSTEMS, 0x0E11B0604091, Subsystem(0x0E11, "Smart Array 6i")
    )


def test_subsystem_vendor_comes_from_line_not_context():
    s0 = ParseState(cur_vendor=0x10DE, cur_vendor_product=0x10DE1BA1)
    _, upd = step(s0, "\t\t1458 1651  GeForce GTX 1070 Max-Q")
    assert upd.value.vendor == 0x1458
    assert upd.key == (0x10DE1BA1 << 16) | 0x1651


def test_step_does_not_mutate_input_state():
    s0 = INITIAL_STATE
    s1, _ = step(s0, "C 02  Network controller")
    assert s0 == ParseState()
    assert s1 is not s0


def test_malformed_hex_in_class_header():
    with pytest.raises(MalformedHexField) as ei:
        step(INITIAL_STATE, "C ZZ  Bad", 7)
    assert ei.value.lineno == 7
    assert ei.value.line == "C ZZ  Bad"
    assert ei.value.field == "class"
    assert "line 7" in str(ei.value)


@pytest.mark.parametrize(
    "text",
    ["+f", " f", "0x"],
)
def test_hex_field_rejects_what_int_would_accept(text):
    with pytest.raises(MalformedHexField):
        step(INITIAL_STATE, f"C {text}  Name")


def test_malformed_subsystem_second_field():
    s0 = ParseState(cur_vendor=0x10DE, cur_vendor_product=0x10DE0020)
    with pytest.raises(MalformedHexField) as ei:
        step(s0, "\t\t1043 02g0  V3400 TNT", 3)
    assert ei.value.field == "subdevice"
    assert ei.value.text == "02g0"


@pytest.mark.parametrize(
    "state, line",
    [
        (INITIAL_STATE, "beef"),
        (INITIAL_STATE, "C 04"),
        (ParseState(in_class_block=True), "\t01"),
        (ParseState(in_class_block=True), "\t\t02"),
        (INITIAL_STATE, "\t\tbaad"),
        (INITIAL_STATE, "\t"),
    ],
)
def test_short_lines_are_malformed(state, line):
    with pytest.raises(MalformedLine):
        step(state, line, 1)


def test_line_at_minimum_length_has_empty_name():
    _, upd = step(INITIAL_STATE, "beef  ")
    assert upd == TableUpdate(TableKind.VENDORS, 0xBEEF, "")


def test_layout_widths():
    assert [f.bits for f in LAYOUTS[RecordKind.CLASS].fields] == [8]
    assert [f.bits for f in LAYOUTS[RecordKind.PRODUCT].fields] == [16]
    assert [f.bits for f in LAYOUTS[RecordKind.SUBSYSTEM].fields] == [16, 16]


def test_extract_subsystem():
    ids, name = extract(
        LAYOUTS[RecordKind.SUBSYSTEM], "\t\t0a89 0001  Widget", 1
    )
    assert ids == (0x0A89, 0x0001)
    assert name == "Widget"
