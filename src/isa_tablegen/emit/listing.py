"""
Operand Syntax Listing
======================

Human-readable summary of every instruction form, grouped by mnemonic,
with operand placeholders replaced by descriptive labels:

    [%]  -> [adr]
    (%)  -> (ptr)
    %    -> imm

Example output:
    mov:
      MOV A, X
      MOV A, imm
      MOV A, [adr]
      MOV A, X(ptr)Y
"""

import re
from types import MappingProxyType
from typing import Mapping

from isa_tablegen.isa.grouper import InstructionGroups

# Order matters: bracketed placeholders first, then the bare one
_PLACEHOLDER_LABELS = (
    (re.compile(r"\[%\]"), "[adr]"),
    (re.compile(r"\(%\)"), "(ptr)"),
    (re.compile(r"%"), "imm"),
)


def describe_syntax(syntax: str) -> str:
    """
    Replace operand placeholders with descriptive labels.

        >>> describe_syntax("MOV A, X(%)Y")
        'MOV A, X(ptr)Y'
    """
    for pattern, label in _PLACEHOLDER_LABELS:
        syntax = pattern.sub(label, syntax)
    return syntax


def build_syntax_listing(groups: InstructionGroups) -> Mapping[str, tuple[str, ...]]:
    """Described syntax of every instruction, keyed by root mnemonic."""
    return MappingProxyType({
        mnemonic: tuple(describe_syntax(insn.name) for insn in members)
        for mnemonic, members in groups.items()
    })


def emit_syntax_listing(listing: Mapping[str, tuple[str, ...]], indent: str = "  ") -> str:
    """Render a syntax listing as text, one "mnemonic:" block per group."""
    lines = []
    for mnemonic, forms in listing.items():
        lines.append(f"{mnemonic}:")
        lines.extend(f"{indent}{form}" for form in forms)
    return "\n".join(lines) + "\n"
