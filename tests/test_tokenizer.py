# =============================================================================
# test_tokenizer.py - Mnemonic Tokenizer Tests
# =============================================================================

import pytest
from isa_tablegen.errors import MalformedSyntaxError
from isa_tablegen.isa.definition import InstructionDef
from isa_tablegen.isa.tokenizer import root_mnemonic, split_mnemonic, tokenize


class TestTokenize:
    """Test extraction of word tokens."""

    def test_empty_string(self):
        assert tokenize("") == ()

    def test_single_word(self):
        assert tokenize("NOP") == ("nop",)

    def test_lowercases(self):
        assert tokenize("MoV A, X") == ("mov", "a", "x")

    def test_ignores_placeholders(self):
        assert tokenize("ADD A, [%]") == ("add", "a")

    def test_indexed_pointer(self):
        assert tokenize("MOV A, X(%)Y") == ("mov", "a", "x", "y")

    def test_punctuation_only(self):
        assert tokenize("%, [%], (%)") == ()

    def test_multi_letter_registers(self):
        assert tokenize("MOV STL, A") == ("mov", "stl", "a")

    def test_digits_and_underscores(self):
        assert tokenize("LD_2 R1") == ("ld_2", "r1")


class TestRootMnemonic:
    """Test root mnemonic extraction."""

    def test_from_string(self):
        assert root_mnemonic("CALL (%)") == "call"

    def test_from_instruction(self):
        assert root_mnemonic(InstructionDef("JMPT X[%]", 0x75)) == "jmpt"

    def test_no_operands(self):
        assert root_mnemonic("HLT") == "hlt"

    @pytest.mark.parametrize("syntax", ["", "   ", ", %", "[%]", " NOP"])
    def test_malformed(self, syntax):
        with pytest.raises(MalformedSyntaxError) as exc_info:
            root_mnemonic(syntax)
        assert exc_info.value.syntax == syntax


class TestSplitMnemonic:
    """Test splitting off the operand text."""

    def test_two_operands(self):
        assert split_mnemonic("ADD A, [%]") == ("add", "A, [%]")

    def test_no_operands(self):
        assert split_mnemonic("RET") == ("ret", "")

    def test_operand_text_is_stripped(self):
        assert split_mnemonic("INC   A  ") == ("inc", "A")

    def test_lowercasing_that_changes_length(self):
        # "\u0130".lower() is two code points; the operand text must stay intact
        assert split_mnemonic("\u0130N ,A") == ("i\u0307n", ",A")
        assert split_mnemonic("\u0130NC A") == ("i\u0307nc", "A")
