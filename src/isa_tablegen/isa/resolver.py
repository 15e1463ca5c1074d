"""
Addressing Mode Resolver
========================

Turns one instruction definition into a ResolvedVariant: opcode, operand
count, operand addressing modes and word count.

Operands
--------
The text after the root mnemonic is split on commas:

    "NOP"          -> 0 operands
    "INC [%]"      -> 1 operand:  MEM
    "MOV A, X(%)Y" -> 2 operands: REG_A, PTR_XY

Word Count
----------
The word count is the number of bytes that follow the opcode. It is taken
from the declared args, not from the syntax:

- exactly one declared arg: bits / 8 (MOV A, [%] with a 16-bit address -> 2)
- no declared args: 0 (register-only forms such as PSH A or MOV A, X)
- two declared args: 0

The last rule belongs to the GR8CPU encoding, where no instruction carries
two immediates; table consumers emit such operands themselves.
"""

from dataclasses import dataclass

from isa_tablegen.errors import OperandArityError, OperandWidthError
from isa_tablegen.isa.definition import InstructionDef
from isa_tablegen.isa.modes import AddressingMode, resolve_mode
from isa_tablegen.isa.tokenizer import split_mnemonic

MAX_OPERANDS = 2


@dataclass(frozen=True)
class ResolvedVariant:
    """
    One resolved instruction variant, as stored in the lookup table.

    Attributes:
        opcode: Opcode byte
        operand_count: Number of syntactic operands (0, 1 or 2)
        word_count: Bytes following the opcode
        modes: Addressing mode of each operand, in order
        syntax: Syntax string the variant was resolved from
    """
    opcode: int
    operand_count: int
    word_count: int
    modes: tuple[AddressingMode, ...] = ()
    syntax: str = ""

    @property
    def size(self) -> int:
        """Total instruction size in bytes, opcode included."""
        return 1 + self.word_count

    def __repr__(self) -> str:
        modes = ", ".join(mode.name for mode in self.modes)
        return (
            f"ResolvedVariant(opcode=${self.opcode:02X}, operands={self.operand_count}, "
            f"words={self.word_count}, modes=[{modes}])"
        )


def split_operands(operand_text: str) -> list[str]:
    """
    Split operand text on commas into trimmed operand substrings.

        >>> split_operands("A, [%]")
        ['A', '[%]']
        >>> split_operands("")
        []
    """
    if not operand_text.strip():
        return []
    return [part.strip() for part in operand_text.split(",")]


def _word_count(insn: InstructionDef, mnemonic: str) -> int:
    if len(insn.args) != 1:
        return 0
    bits = insn.args[0].bits
    if bits <= 0 or bits % 8:
        raise OperandWidthError(insn.name, mnemonic, bits)
    return bits // 8


def resolve_instruction(insn: InstructionDef) -> ResolvedVariant:
    """
    Resolve an instruction definition into its lookup-table variant.

    Raises:
        MalformedSyntaxError: If the syntax has no leading mnemonic
        OperandArityError: If the operand count is not 0, 1 or 2, or more
            args are declared than the syntax has operands
        UnknownAddressingModeError: If an operand has no addressing mode
        OperandWidthError: If the sized operand is not whole bytes wide
    """
    mnemonic, operand_text = split_mnemonic(insn.name)
    operands = split_operands(operand_text)

    if len(operands) > MAX_OPERANDS:
        raise OperandArityError(insn.name, mnemonic, len(operands))
    if len(insn.args) > MAX_OPERANDS:
        raise OperandArityError(
            insn.name, mnemonic, len(insn.args), detail="declared args"
        )
    if len(insn.args) > len(operands):
        raise OperandArityError(
            insn.name, mnemonic, len(insn.args),
            detail=f"{len(insn.args)} args declared for {len(operands)} operands",
        )

    if not operands:
        return ResolvedVariant(insn.opcode, 0, 0, (), insn.name)

    modes = tuple(resolve_mode(operand, insn.name, mnemonic) for operand in operands)
    return ResolvedVariant(
        opcode=insn.opcode,
        operand_count=len(operands),
        word_count=_word_count(insn, mnemonic),
        modes=modes,
        syntax=insn.name,
    )
