"""
Keyword Registry
================

Collects every word used in the instruction set into one ordered,
duplicate-free table. The assembler's lexer matches identifiers against
this table, so its order becomes part of the generated interface: the
index of a keyword is its token id.

Ordering
--------
1. Root mnemonics, in the order their first instruction appears. These
   occupy indices 0 .. mnemonic_count - 1, so "is this token an
   instruction?" is a single range check.
2. Every other word (register names and the like), in first-seen order.

A word that is both a root mnemonic and an operand word appears once, in
the mnemonic block.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from isa_tablegen.isa.definition import InstructionDef
from isa_tablegen.isa.tokenizer import root_mnemonic, tokenize

logger = logging.getLogger(__name__)

DEFAULT_KEYWORD_PREFIX = "KEYW_"


@dataclass(frozen=True)
class KeywordTable(Sequence[str]):
    """
    Immutable ordered keyword set.

    Attributes:
        keywords: All keywords, mnemonics first
        mnemonic_count: How many leading keywords are root mnemonics
    """
    keywords: tuple[str, ...]
    mnemonic_count: int

    def __getitem__(self, index):
        return self.keywords[index]

    def __len__(self) -> int:
        return len(self.keywords)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keywords)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self.keywords

    @property
    def mnemonics(self) -> tuple[str, ...]:
        return self.keywords[:self.mnemonic_count]

    def is_mnemonic(self, keyword: str) -> bool:
        """True if the keyword is the root mnemonic of some instruction."""
        return keyword.lower() in self.mnemonics

    def identifiers(self, prefix: str = DEFAULT_KEYWORD_PREFIX) -> tuple[str, ...]:
        """
        Symbolic identifier for each keyword, parallel to the keyword order.

            >>> table.identifiers("R3_KEYW_")[:2]
            ('R3_KEYW_BKI', 'R3_KEYW_BRK')
        """
        return tuple(f"{prefix}{keyword.upper()}" for keyword in self.keywords)


def build_keywords(instructions: Iterable[InstructionDef]) -> KeywordTable:
    """
    Build the keyword table for an instruction set.

    Raises:
        MalformedSyntaxError: If an instruction has no leading mnemonic
    """
    instructions = list(instructions)

    # dict keeps first-seen order and gives O(1) membership
    seen: dict[str, None] = {}
    for insn in instructions:
        seen.setdefault(root_mnemonic(insn), None)
    mnemonic_count = len(seen)

    for insn in instructions:
        for token in tokenize(insn.name):
            seen.setdefault(token, None)

    table = KeywordTable(tuple(seen), mnemonic_count)
    logger.debug(
        f"Keyword table: {len(table)} keywords, {mnemonic_count} mnemonics"
    )
    return table
