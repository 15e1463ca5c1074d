"""
Addressing Modes
================

This module defines the closed set of operand addressing modes and the
surface syntax each one is written with in an ISA definition. The mode
values are the numeric encodings the generated assembler compares against
when matching parsed operands.

Addressing Modes
----------------
1. **Registers**: A, X, Y, F, STL, STH
   - Encoded in the opcode, no operand bytes

2. **IMM**: literal value, written %
   - Example: MOV A, %   (MOV A, 0x41)

3. **MEM**: direct memory address, written [%]
   - Example: MOV A, [%]   (MOV A, [counter])

4. **MEM_X / MEM_Y**: memory indexed by X or Y, written X[%] / Y[%]
   - Effective address = address + X (or Y)

5. **PTR**: pointer indirect, written (%)
   - The 16-bit pointer stored at the address is dereferenced

6. **PTR_X / PTR_Y / PTR_XY**: indexed pointer forms
   - X(%)   : X added before the pointer is read
   - (%)Y   : Y added after the pointer is read
   - X(%)Y  : both

Encoding
--------
The low nibble selects index registers (X = 0x2, Y = 0x4), the high nibble
the access kind (0x1 memory, 0x2 pointer). Registers without an index role
(F, STL, STH) live at 0xF1-0xF3.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Optional

from isa_tablegen.errors import UnknownAddressingModeError


# =============================================================================
# Addressing Mode Enumeration
# =============================================================================

class AddressingMode(IntEnum):
    """
    Operand addressing modes, valued by their assembler encoding.

    Usage:
        >>> AddressingMode.MEM_X
        <AddressingMode.MEM_X: 18>
        >>> AddressingMode.MEM_X.tag
        'A_MEM_X'
    """
    IMM = 0x00      # %
    REG_A = 0x01    # A
    REG_X = 0x02    # X
    REG_Y = 0x04    # Y
    MEM = 0x10      # [%]
    MEM_X = 0x12    # X[%]
    MEM_Y = 0x14    # Y[%]
    PTR = 0x20      # (%)
    PTR_X = 0x22    # X(%)
    PTR_Y = 0x24    # (%)Y
    PTR_XY = 0x26   # X(%)Y
    REG_F = 0xF1    # F
    REG_STL = 0xF2  # STL
    REG_STH = 0xF3  # STH

    @property
    def tag(self) -> str:
        """Symbolic name used in generated source, e.g. "A_REG_X"."""
        return f"A_{self.name}"

    @property
    def is_register(self) -> bool:
        return self.name.startswith("REG_")

    @property
    def surface(self) -> str:
        """The operand syntax this mode is written with."""
        return _SURFACE_BY_MODE[self]

    def __str__(self) -> str:
        """Return human-readable name for error messages."""
        return {
            AddressingMode.IMM: "immediate",
            AddressingMode.MEM: "memory",
            AddressingMode.MEM_X: "memory indexed by X",
            AddressingMode.MEM_Y: "memory indexed by Y",
            AddressingMode.PTR: "pointer",
            AddressingMode.PTR_X: "pointer indexed by X",
            AddressingMode.PTR_Y: "pointer indexed by Y",
            AddressingMode.PTR_XY: "pointer indexed by X and Y",
        }.get(self, f"register {self.name[4:]}")


# =============================================================================
# Surface Syntax Table
# =============================================================================
# Operand substrings are matched verbatim after trimming. The table is total
# over AddressingMode; _check_table() asserts that at import time.
# =============================================================================

SURFACE_FORMS = MappingProxyType({
    "A": AddressingMode.REG_A,
    "X": AddressingMode.REG_X,
    "Y": AddressingMode.REG_Y,
    "F": AddressingMode.REG_F,
    "STL": AddressingMode.REG_STL,
    "STH": AddressingMode.REG_STH,
    "%": AddressingMode.IMM,
    "[%]": AddressingMode.MEM,
    "X[%]": AddressingMode.MEM_X,
    "Y[%]": AddressingMode.MEM_Y,
    "(%)": AddressingMode.PTR,
    "X(%)": AddressingMode.PTR_X,
    "(%)Y": AddressingMode.PTR_Y,
    "X(%)Y": AddressingMode.PTR_XY,
})

_SURFACE_BY_MODE = {mode: form for form, mode in SURFACE_FORMS.items()}


def _check_table() -> None:
    missing = set(AddressingMode) - set(_SURFACE_BY_MODE)
    if missing or len(_SURFACE_BY_MODE) != len(SURFACE_FORMS):
        raise RuntimeError(f"surface form table is not a bijection (missing: {missing})")


_check_table()


def lookup_mode(operand: str) -> Optional[AddressingMode]:
    """Return the mode for an operand substring, or None if it has none."""
    return SURFACE_FORMS.get(operand.strip())


def resolve_mode(operand: str, syntax: str, mnemonic: str) -> AddressingMode:
    """
    Resolve an operand substring of an instruction to its addressing mode.

    Args:
        operand: Operand syntax, e.g. "X[%]"
        syntax: Full syntax string of the instruction (for errors)
        mnemonic: Root mnemonic of the instruction (for errors)

    Raises:
        UnknownAddressingModeError: If the operand has no entry in the table
    """
    mode = lookup_mode(operand)
    if mode is None:
        raise UnknownAddressingModeError(
            syntax, mnemonic, operand.strip(), known_forms=list(SURFACE_FORMS)
        )
    return mode

