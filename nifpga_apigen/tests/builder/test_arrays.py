"""
Test merging of array data declarations with their size declarations.
"""

import logging

import pytest

from nifpga_apigen.builder import ArrayAssembler
from nifpga_apigen.model import Datatype, RegisterKind
from nifpga_apigen.parser import DuplicateDeclarationError, ParseError, RawDeclaration


def data(name, address="0x18030", kind=RegisterKind.INDICATOR, type_code="U8", line=1):
    return RawDeclaration(kind=kind, array=True, type_code=type_code, size=False, name=name, address=address, line=line)


def size(name, count, kind=RegisterKind.INDICATOR, type_code="U8", line=1):
    return RawDeclaration(kind=kind, array=True, type_code=type_code, size=True, name=name, address=count, line=line)


class TestArrayMerge:
    def test_size_after_data(self):
        assembler = ArrayAssembler()
        assembler.add_data(data("Samples"), Datatype.U8)
        assembler.add_length(size("Samples", "16"), Datatype.U8)

        indicators, controls = assembler.finish()

        assert controls == []
        (array,) = indicators
        assert array.name == "Samples"
        assert array.address == "0x18030"
        assert array.length == 16

    def test_size_before_data(self):
        assembler = ArrayAssembler()
        assembler.add_length(size("Gains", "3", kind=RegisterKind.CONTROL, type_code="Dbl"), Datatype.DBL)
        assembler.add_data(data("Gains", "0x18040", kind=RegisterKind.CONTROL, type_code="Dbl"), Datatype.DBL)

        indicators, (array,) = assembler.finish()

        assert indicators == []
        assert array.length == 3
        assert array.datatype == Datatype.DBL

    def test_hex_size(self):
        assembler = ArrayAssembler()
        assembler.add_data(data("Samples"), Datatype.U8)
        assembler.add_length(size("Samples", "0x20"), Datatype.U8)
        (array,), _ = assembler.finish()
        assert array.length == 32

    def test_missing_size_leaves_zero(self):
        assembler = ArrayAssembler()
        assembler.add_data(data("Samples"), Datatype.U8)
        (array,), _ = assembler.finish()
        assert array.length == 0

    def test_unmatched_size_is_dropped(self, caplog):
        assembler = ArrayAssembler()
        with caplog.at_level(logging.DEBUG, logger="nifpga_apigen.builder.arrays"):
            assembler.add_length(size("Ghost", "4"), Datatype.U8)
            indicators, controls = assembler.finish()

        assert indicators == []
        assert controls == []
        assert "Ghost" in caplog.text

    def test_size_must_match_kind_and_type(self):
        assembler = ArrayAssembler()
        assembler.add_data(data("Samples"), Datatype.U8)
        assembler.add_length(size("Samples", "8", kind=RegisterKind.CONTROL), Datatype.U8)
        assembler.add_length(size("Samples", "9", type_code="U16"), Datatype.U16)

        (array,), controls = assembler.finish()

        assert array.length == 0
        assert controls == []

    def test_same_name_in_both_kinds(self):
        assembler = ArrayAssembler()
        assembler.add_data(data("Buffer", "0x100"), Datatype.U8)
        assembler.add_data(data("Buffer", "0x200", kind=RegisterKind.CONTROL), Datatype.U8)
        assembler.add_length(size("Buffer", "4"), Datatype.U8)
        assembler.add_length(size("Buffer", "5", kind=RegisterKind.CONTROL), Datatype.U8)

        (indicator,), (control,) = assembler.finish()

        assert (indicator.address, indicator.length) == ("0x100", 4)
        assert (control.address, control.length) == ("0x200", 5)


class TestArrayErrors:
    def test_duplicate_data(self):
        assembler = ArrayAssembler()
        assembler.add_data(data("Samples"), Datatype.U8)
        with pytest.raises(DuplicateDeclarationError) as exc_info:
            assembler.add_data(data("Samples", "0x18034", line=7), Datatype.U8)
        assert exc_info.value.line == 7

    def test_duplicate_name_with_other_type(self):
        assembler = ArrayAssembler()
        assembler.add_data(data("Samples"), Datatype.U8)
        with pytest.raises(DuplicateDeclarationError):
            assembler.add_data(data("Samples", type_code="I32"), Datatype.I32)

    def test_duplicate_size(self):
        assembler = ArrayAssembler()
        assembler.add_length(size("Samples", "4"), Datatype.U8)
        with pytest.raises(DuplicateDeclarationError):
            assembler.add_length(size("Samples", "4"), Datatype.U8)

    def test_malformed_size(self):
        assembler = ArrayAssembler()
        with pytest.raises(ParseError) as exc_info:
            assembler.add_length(size("Samples", "0xZZ", line=12), Datatype.U8)
        assert exc_info.value.line == 12

    def test_size_must_fit_in_32_bits(self):
        assembler = ArrayAssembler()
        assembler.add_length(size("Samples", "0xFFFFFFFF"), Datatype.U8)
        with pytest.raises(ParseError, match="exceeds 32 bits") as exc_info:
            assembler.add_length(size("Wide", "0xFFFFFFFFFFF", line=9), Datatype.U8)
        assert exc_info.value.line == 9
