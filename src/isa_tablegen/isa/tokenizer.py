"""
Mnemonic Tokenizer
==================

Splits instruction syntax patterns into lowercase word tokens. Only runs of
word characters count; operand punctuation such as %, [ ], ( ) and commas
is ignored:

    >>> tokenize("MOV A, X(%)Y")
    ('mov', 'a', 'x', 'y')
"""

import re
from typing import Union

from isa_tablegen.errors import MalformedSyntaxError
from isa_tablegen.isa.definition import InstructionDef

_WORD = re.compile(r"\w+")
_LEADING_WORD = re.compile(r"^\w+")


def _leading_word(syntax: str) -> re.Match:
    match = _LEADING_WORD.match(syntax)
    if match is None:
        raise MalformedSyntaxError(syntax)
    return match


def tokenize(syntax: str) -> tuple[str, ...]:
    """Return the word tokens of a syntax string, lowercased, in order."""
    return tuple(match.lower() for match in _WORD.findall(syntax))


def root_mnemonic(instruction: Union[InstructionDef, str]) -> str:
    """
    Return the lowercase root mnemonic (first word) of an instruction.

    The word must start the string; leading punctuation or whitespace
    makes the syntax malformed.

    Raises:
        MalformedSyntaxError: If the syntax has no leading word token
    """
    syntax = instruction.name if isinstance(instruction, InstructionDef) else instruction
    return _leading_word(syntax).group(0).lower()


def split_mnemonic(syntax: str) -> tuple[str, str]:
    """
    Split a syntax string into (root mnemonic, operand text).

    The operand text is everything after the mnemonic, stripped.

        >>> split_mnemonic("ADD A, [%]")
        ('add', 'A, [%]')
    """
    match = _leading_word(syntax)
    return match.group(0).lower(), syntax[match.end():].strip()
