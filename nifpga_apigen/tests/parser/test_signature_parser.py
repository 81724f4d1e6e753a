"""Tests for signature declaration lookup."""

import pytest

from nifpga_apigen.parser import MissingSignatureError, ParseError, SignatureParser


class TestSignatureParser:
    def test_resolves_signature_and_bitfile(self, robot_header):
        signature = SignatureParser().parse_text(robot_header)
        assert signature.bitfile == "robot"
        assert signature.value == "A3F29C0D51E84B7A9C20E1D4F6B83A57"

    def test_bitfile_with_underscores(self):
        text = 'static const char* const NiFpga_main_fpga_v2_Signature = "00FF";'
        signature = SignatureParser().parse_text(text)
        assert signature.bitfile == "main_fpga_v2"
        assert signature.value == "00FF"

    def test_missing_signature(self):
        with pytest.raises(MissingSignatureError):
            SignatureParser().parse_text("NiFpga_robot_IndicatorU8_A = 0x4,")

    def test_signature_without_semicolon_is_not_a_declaration(self):
        with pytest.raises(MissingSignatureError):
            SignatureParser().parse_text('NiFpga_robot_Signature = "ABCD"')

    def test_commented_signature_is_ignored(self):
        text = '/* static const char* const NiFpga_robot_Signature = "ABCD"; */'
        with pytest.raises(MissingSignatureError):
            SignatureParser().parse_text(text)

    def test_multiple_signatures(self):
        text = 'NiFpga_a_Signature = "AA";\nNiFpga_b_Signature = "BB";\n'
        with pytest.raises(ParseError) as exc_info:
            SignatureParser().parse_text(text)
        assert exc_info.value.line == 2

    def test_custom_namespace(self):
        text = 'const char* Acme_robot_Signature = "1234";'
        assert SignatureParser("Acme").parse_text(text).bitfile == "robot"
        with pytest.raises(MissingSignatureError):
            SignatureParser().parse_text(text)
