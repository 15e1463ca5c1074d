"""
Lookup Table Builder
====================

Builds the per-mnemonic instruction lookup table from grouped instruction
definitions. For every root mnemonic the table lists its variants in
definition order; the generated assembler scans that list for the first
variant whose operand count and modes match the parsed operands.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping, Optional

from isa_tablegen.errors import TableBuildError
from isa_tablegen.isa.definition import InstructionDef
from isa_tablegen.isa.grouper import InstructionGroups
from isa_tablegen.isa.modes import resolve_mode
from isa_tablegen.isa.resolver import ResolvedVariant, resolve_instruction, split_operands
from isa_tablegen.isa.tokenizer import split_mnemonic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupEntry:
    """All variants of one root mnemonic."""
    mnemonic: str
    variants: tuple[ResolvedVariant, ...]

    @property
    def count(self) -> int:
        return len(self.variants)

    def find(self, modes: tuple) -> Optional[ResolvedVariant]:
        """Return the first variant taking exactly these operand modes."""
        for variant in self.variants:
            if variant.modes == tuple(modes):
                return variant
        return None


class LookupTable(Mapping[str, LookupEntry]):
    """
    Read-only mapping of root mnemonic -> LookupEntry.

    Iterates in the order the mnemonics first appear in the ISA definition,
    which is also the keyword order of the mnemonics.
    """

    def __init__(self, entries: Iterable[LookupEntry]):
        self._entries = MappingProxyType({entry.mnemonic: entry for entry in entries})

    def __getitem__(self, mnemonic: str) -> LookupEntry:
        return self._entries[mnemonic.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LookupTable({len(self)} mnemonics, {self.variant_count} variants)"

    @property
    def variant_count(self) -> int:
        return sum(entry.count for entry in self._entries.values())

    def entries(self) -> tuple[LookupEntry, ...]:
        return tuple(self._entries.values())


def validate_surface_forms(instructions: Iterable[InstructionDef]) -> None:
    """
    Check that every operand of every instruction has an addressing mode.

    Run before any table is built so an ISA that references an unmapped
    operand form is rejected as a whole.

    Raises:
        MalformedSyntaxError: If an instruction has no leading mnemonic
        UnknownAddressingModeError: For the first unmapped operand found
    """
    for insn in instructions:
        mnemonic, operand_text = split_mnemonic(insn.name)
        for operand in split_operands(operand_text):
            resolve_mode(operand, insn.name, mnemonic)


def build_lookup_table(
    groups: InstructionGroups,
    resolver: Callable[[InstructionDef], ResolvedVariant] = resolve_instruction,
) -> LookupTable:
    """
    Resolve every instruction of every group into a LookupTable.

    Args:
        groups: Instructions grouped by root mnemonic
        resolver: Turns one instruction into its variant (default:
            resolve_instruction)

    Raises:
        TableBuildError: On the first instruction that fails to resolve.
            The error names the instruction syntax and its root mnemonic.
    """
    entries = []
    for mnemonic, members in groups.items():
        variants = []
        for insn in members:
            try:
                variants.append(resolver(insn))
            except TableBuildError as e:
                logger.debug(f"Cannot resolve '{insn.name}' in group '{mnemonic}': {e.message}")
                raise
        entries.append(LookupEntry(mnemonic, tuple(variants)))

    table = LookupTable(entries)
    logger.debug(f"Lookup table: {len(table)} mnemonics, {table.variant_count} variants")
    return table
