"""
ISA Table Generator Error Hierarchy
===================================

This module defines the exception hierarchy for the table generator.
All exceptions inherit from IsaError, allowing callers to catch every
generator-related error with a single except clause.

Exception Hierarchy
-------------------
IsaError (base)
├── IsaDefinitionError - malformed instruction records or ISA files
└── TableBuildError (carries syntax, mnemonic, operand)
    ├── MalformedSyntaxError - syntax string has no leading mnemonic
    ├── UnknownAddressingModeError - operand surface form not in mode table
    ├── OperandArityError - operand count other than 0, 1 or 2
    └── OperandWidthError - operand bit width not a multiple of 8

Design Philosophy
-----------------
Table generation is a batch pass: the first error stops the run and no
partial output is usable. Every build error names the offending
instruction so the ISA definition can be fixed directly.

Error messages follow this format:
    error: description
      in: ADD A, Z[%]
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class IsaError(Exception):
    """
    Base exception for all table generator errors.

        try:
            tables = generate_tables(isa)
        except IsaError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Input Errors
# =============================================================================

class IsaDefinitionError(IsaError):
    """
    Invalid ISA definition record or file.

    Raised when:
    - A record is missing its "name", "hex" or "args" field
    - The opcode is not a hex-encoded byte
    - An operand entry has no integer "bits" width
    - An ISA file is not valid JSON or has the wrong top-level shape
    """

    def __init__(self, message: str, index: Optional[int] = None):
        self.message = message
        self.index = index
        if index is not None:
            message = f"instruction #{index}: {message}"
        super().__init__(message)


# =============================================================================
# Table Build Errors
# =============================================================================

class TableBuildError(IsaError):
    """
    Base exception for errors raised while building tables.

    Attributes:
        message: The error description
        syntax: Syntax string of the offending instruction
        mnemonic: Root mnemonic of the offending instruction (if known)
        operand: Operand substring that failed (if any)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        syntax: str,
        mnemonic: Optional[str] = None,
        operand: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.syntax = syntax
        self.mnemonic = mnemonic
        self.operand = operand
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with instruction context and hint.

        Example output:
            error: 'add' operand 'Z[%]' has no addressing mode
              in: ADD A, Z[%]
            hint: known operand forms: A, X, ...
        """
        parts = [f"error: {self.message}", f"  in: {self.syntax}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


class MalformedSyntaxError(TableBuildError):
    """
    Syntax string without a leading word token.

    Every instruction syntax must start with its mnemonic, e.g. "MOV A, X".
    Strings such as "", "   " or ", %" cannot be grouped or tokenized into
    a root mnemonic.
    """

    def __init__(self, syntax: str):
        super().__init__(
            "syntax string has no leading mnemonic",
            syntax=syntax,
            hint="instruction syntax must start with a word, e.g. 'NOP' or 'MOV A, X'",
        )


class UnknownAddressingModeError(TableBuildError):
    """
    Operand surface form not present in the addressing mode table.

    Operand syntax is matched verbatim; there is no fuzzy matching. An
    operand such as "Z[%]" (unknown index register) is a fatal error.
    """

    def __init__(
        self,
        syntax: str,
        mnemonic: str,
        operand: str,
        known_forms: Optional[list[str]] = None,
    ):
        self.known_forms = known_forms or []

        hint = None
        if self.known_forms:
            hint = "known operand forms: " + ", ".join(self.known_forms)

        super().__init__(
            f"'{mnemonic}' operand '{operand}' has no addressing mode",
            syntax=syntax,
            mnemonic=mnemonic,
            operand=operand,
            hint=hint,
        )


class OperandArityError(TableBuildError):
    """
    Unsupported operand count.

    Instructions take 0, 1 or 2 operands. Syntax strings with more than
    one comma, records declaring more than two args, and records declaring
    more args than the syntax has operands are rejected.
    """

    def __init__(self, syntax: str, mnemonic: str, count: int, detail: str = ""):
        self.count = count
        message = f"'{mnemonic}' has unsupported operand arity {count}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(
            message,
            syntax=syntax,
            mnemonic=mnemonic,
            hint="instructions take 0, 1 or 2 operands",
        )


class OperandWidthError(TableBuildError):
    """
    Operand bit width cannot be expressed in whole bytes.

    The word count of an instruction is the width of its immediate in
    bytes, so widths must be positive multiples of 8.
    """

    def __init__(self, syntax: str, mnemonic: str, bits: int):
        self.bits = bits
        super().__init__(
            f"'{mnemonic}' operand width {bits} is not a positive multiple of 8 bits",
            syntax=syntax,
            mnemonic=mnemonic,
        )
