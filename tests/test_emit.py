# =============================================================================
# test_emit.py - Emitter Tests
# =============================================================================
# Tests for C source rendering and the operand syntax listing. The lookup
# table rendered for the bundled ISA must match the reference assembler's
# table byte for byte (tests/data/gr8cpu_r3_lut.c).
# =============================================================================

from pathlib import Path

import pytest
from isa_tablegen.config import GeneratorConfig
from isa_tablegen.emit import (
    build_syntax_listing,
    describe_syntax,
    emit_c_source,
    emit_keyword_array,
    emit_keyword_enum,
    emit_lookup_table,
    emit_mode_defines,
    emit_syntax_listing,
)
from isa_tablegen.isa import generate_tables, group_instructions, load_isa

DATA_DIR = Path(__file__).parent / "data"


# =============================================================================
# Syntax Listing
# =============================================================================

class TestDescribeSyntax:
    """Test placeholder replacement."""

    @pytest.mark.parametrize("syntax, expected", [
        ("NOP", "NOP"),
        ("PSH %", "PSH imm"),
        ("INC [%]", "INC [adr]"),
        ("CALL (%)", "CALL (ptr)"),
        ("MOV A, X[%]", "MOV A, X[adr]"),
        ("MOV A, X(%)Y", "MOV A, X(ptr)Y"),
        ("MOV (%)Y, A", "MOV (ptr)Y, A"),
        ("CPY [%], %", "CPY [adr], imm"),
    ])
    def test_describe(self, syntax, expected):
        assert describe_syntax(syntax) == expected


class TestSyntaxListing:
    """Test the per-mnemonic listing."""

    def test_build(self, small_isa):
        listing = build_syntax_listing(group_instructions(small_isa))
        assert listing["psh"] == ("PSH A", "PSH imm", "PSH [adr]")
        assert list(listing) == ["nop", "psh", "mov", "jmp"]

    def test_emit(self, small_isa):
        text = emit_syntax_listing(build_syntax_listing(group_instructions(small_isa)))
        assert text.startswith("nop:\n  NOP\npsh:\n  PSH A\n  PSH imm\n")
        assert text.endswith("jmp:\n  JMP (ptr)\n")

    def test_pipeline_listing(self, r3_tables):
        assert r3_tables.syntax_listing["jmpt"] == ("JMPT X[adr]",)


# =============================================================================
# C Source
# =============================================================================

class TestModeDefines:

    def test_all_modes_defined(self):
        text = emit_mode_defines()
        assert text.count("#define A_") == 14

    def test_values(self):
        lines = emit_mode_defines().splitlines()
        assert lines[0].split() == ["#define", "A_IMM", "0x00"]
        assert lines[-1].split() == ["#define", "A_REG_STH", "0xF3"]


class TestKeywordEmit:

    def test_array_layout(self):
        tables = generate_tables(load_isa([
            {"name": "BKI", "hex": "00"},
            {"name": "CALL %", "hex": "02", "args": [{"type": {"bits": 16}}]},
            {"name": "RET", "hex": "03"},
            {"name": "PSH A", "hex": "04"},
            {"name": "PSH X", "hex": "05"},
        ]))
        text = emit_keyword_array(tables.keywords)
        assert text.splitlines() == [
            "// All keywords that occur.",
            "char *r3_iasm_keyw[] = {",
            '\t"bki",  "call", "ret",  "psh",',
            '\t"a",    "x",',
            "};",
        ]

    def test_enum(self, r3_tables):
        text = emit_keyword_enum(r3_tables.keywords)
        assert "typedef enum r3_iasm_keyw_id {" in text
        assert "\tR3_KEYW_BKI,  R3_KEYW_BRK,  R3_KEYW_CALL, R3_KEYW_RET," in text
        assert "#define R3_TKN_INSN_KEYWORDS 46" in text
        assert "#define R3_NUM_KEYW 52" in text

    def test_custom_prefix_and_width(self, r3_tables):
        config = GeneratorConfig(prefix="cpu", keywords_per_row=8, indent="    ")
        text = emit_keyword_enum(r3_tables.keywords, config)
        assert "typedef enum cpu_iasm_keyw_id {" in text
        first_row = text.splitlines()[2]
        assert first_row.startswith("    CPU_KEYW_BKI,")
        assert first_row.count("CPU_KEYW_") == 8

    def test_explicit_keyword_prefix(self, r3_tables):
        config = GeneratorConfig(keyword_prefix="TOK_")
        assert "TOK_CALL" in emit_keyword_enum(r3_tables.keywords, config)


class TestLookupEmit:

    def test_matches_reference_table(self, r3_tables):
        expected = (DATA_DIR / "gr8cpu_r3_lut.c").read_text()
        assert emit_lookup_table(r3_tables.lookup) == expected

    def test_zero_operand_line(self):
        tables = generate_tables(load_isa([{"name": "NOP", "hex": "00"}]))
        text = emit_lookup_table(tables.lookup)
        assert "\t\t\t{ .n_args=0, .opcode=0x00, .n_words=0},\n" in text
        assert "r3_iasm_modes_t r3_insn_lut[1] = {" in text

    def test_two_operand_line(self):
        tables = generate_tables(load_isa([
            {"name": "ADD A, %", "hex": "38", "args": [{"type": {"bits": 8}}]},
        ]))
        text = emit_lookup_table(tables.lookup)
        assert "{ .n_args=2, .opcode=0x38, .n_words=1, .arg_modes={A_REG_A, A_IMM}}," in text


class TestCSource:

    def test_sections_present(self, r3_tables):
        text = emit_c_source(r3_tables)
        assert text.startswith("// Generated by isagen.")
        for marker in ("#define A_PTR_XY", "R3_KEYW_HLT", "char *r3_iasm_keyw[]", "r3_insn_lut[46]"):
            assert marker in text

    def test_deterministic(self, r3_isa):
        assert emit_c_source(generate_tables(r3_isa)) == emit_c_source(generate_tables(r3_isa))
