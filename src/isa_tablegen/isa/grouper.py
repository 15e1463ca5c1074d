"""
Instruction Grouper
===================

Partitions an instruction set by root mnemonic. Each group holds every
addressing-mode variant of one logical instruction, e.g. the group "inc"
holds "INC A", "INC [%]", "INC X" and "INC Y".
"""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from isa_tablegen.isa.definition import InstructionDef
from isa_tablegen.isa.tokenizer import root_mnemonic

logger = logging.getLogger(__name__)

InstructionGroups = Mapping[str, tuple[InstructionDef, ...]]


def group_instructions(instructions: Iterable[InstructionDef]) -> InstructionGroups:
    """
    Group instructions by lowercase root mnemonic.

    Groups iterate in the order their first member appears, and members
    keep their input order. Every instruction lands in exactly one group.

    Returns:
        Read-only mapping of mnemonic -> tuple of instructions

    Raises:
        MalformedSyntaxError: If an instruction has no leading mnemonic
    """
    groups: dict[str, list[InstructionDef]] = {}
    for insn in instructions:
        groups.setdefault(root_mnemonic(insn), []).append(insn)

    logger.debug(f"Grouped instructions into {len(groups)} mnemonics")
    return MappingProxyType({key: tuple(members) for key, members in groups.items()})
