# =============================================================================
# test_grouper.py - Instruction Grouper Tests
# =============================================================================

from collections import Counter

import pytest
from isa_tablegen.errors import MalformedSyntaxError
from isa_tablegen.isa.definition import InstructionDef, load_isa
from isa_tablegen.isa.grouper import group_instructions


class TestGroupInstructions:
    """Test partitioning by root mnemonic."""

    def test_groups_by_root(self, small_isa):
        groups = group_instructions(small_isa)
        assert list(groups) == ["nop", "psh", "mov", "jmp"]
        assert [insn.name for insn in groups["psh"]] == ["PSH A", "PSH %", "PSH [%]"]

    def test_member_order_preserved(self, small_isa):
        groups = group_instructions(small_isa)
        assert [insn.opcode for insn in groups["mov"]] == [0x17, 0x20]

    def test_keys_lowercase(self):
        groups = group_instructions([InstructionDef("Nop", 0), InstructionDef("NOP", 1)])
        assert list(groups) == ["nop"]
        assert len(groups["nop"]) == 2

    def test_empty(self):
        assert dict(group_instructions([])) == {}

    def test_read_only(self, small_isa):
        groups = group_instructions(small_isa)
        with pytest.raises(TypeError):
            groups["new"] = ()
        assert isinstance(groups["nop"], tuple)

    def test_union_equals_input(self, r3_isa):
        groups = group_instructions(r3_isa)
        members = [insn for group in groups.values() for insn in group]
        assert Counter(members) == Counter(r3_isa)

    def test_malformed_syntax(self):
        with pytest.raises(MalformedSyntaxError):
            group_instructions(load_isa([{"name": "(%)", "hex": "00"}]))

    def test_reference_group_sizes(self, r3_isa):
        groups = group_instructions(r3_isa)
        assert len(groups) == 46
        assert len(groups["mov"]) == 33
        assert len(groups["psh"]) == 5
        assert len(groups["hlt"]) == 1
