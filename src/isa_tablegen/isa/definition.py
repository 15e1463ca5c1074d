"""
ISA Definition Records
======================

An ISA definition is an ordered list of instruction records:

    {"name": "MOV A, [%]", "hex": "20", "args": [{"type": {"bits": 16}}]}

- **name**: syntax pattern. The first word is the mnemonic; operands use
  register names and the placeholders %, [%], (%) with X/Y index prefixes
  or suffixes.
- **hex**: opcode byte, hex-encoded without prefix.
- **args**: one entry per value the instruction carries after the opcode,
  with its width in bits.

Records are converted into frozen InstructionDef objects. The order of the
input list is significant: it fixes keyword order and variant order in the
generated tables.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Union

from isa_tablegen.errors import IsaDefinitionError

logger = logging.getLogger(__name__)

# Directory holding the bundled ISA definitions
DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# ISA used when no definition file is given
DEFAULT_ISA = "gr8cpu_r3"


# =============================================================================
# Records
# =============================================================================

@dataclass(frozen=True)
class OperandDef:
    """A value carried after the opcode. Only its width matters here."""
    bits: int


@dataclass(frozen=True)
class InstructionDef:
    """
    One syntactic variant of an instruction.

    Attributes:
        name: Syntax pattern, e.g. "ADD A, [%]"
        opcode: Opcode byte (0x00-0xFF)
        args: Declared operand values, in order
    """
    name: str
    opcode: int
    args: tuple[OperandDef, ...] = ()

    @property
    def hex(self) -> str:
        """Opcode as two uppercase hex digits, the form used in ISA files."""
        return f"{self.opcode:02X}"

    def __repr__(self) -> str:
        return f"InstructionDef({self.name!r}, opcode=${self.opcode:02X}, args={len(self.args)})"


# =============================================================================
# Loading
# =============================================================================

def _parse_opcode(value: Any, index: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        opcode = value
    elif isinstance(value, str):
        text = value.strip()
        if text.lower().startswith("0x"):
            text = text[2:]
        try:
            opcode = int(text, 16)
        except ValueError:
            raise IsaDefinitionError(f"invalid opcode {value!r}", index) from None
    else:
        raise IsaDefinitionError(f"invalid opcode {value!r}", index)

    if not 0 <= opcode <= 0xFF:
        raise IsaDefinitionError(f"opcode {value!r} does not fit in a byte", index)
    return opcode


def _parse_arg(arg: Any, index: int) -> OperandDef:
    # {"type": {"bits": 8}} is the canonical shape; {"bits": 8} is accepted too
    if not isinstance(arg, dict):
        raise IsaDefinitionError(f"operand entry must be an object, got {arg!r}", index)
    width = arg.get("type", arg)
    bits = width.get("bits") if isinstance(width, dict) else None
    if not isinstance(bits, int) or isinstance(bits, bool):
        raise IsaDefinitionError(f"operand entry has no integer 'bits': {arg!r}", index)
    return OperandDef(bits)


def instruction_from_dict(record: Any, index: int = 0) -> InstructionDef:
    """
    Convert one {name, hex, args} record into an InstructionDef.

    Args:
        record: The record mapping
        index: Position of the record in its list (for error messages)

    Raises:
        IsaDefinitionError: If a field is missing or malformed
    """
    if isinstance(record, InstructionDef):
        return record
    if not isinstance(record, dict):
        raise IsaDefinitionError(f"record must be an object, got {type(record).__name__}", index)

    name = record.get("name")
    if not isinstance(name, str):
        raise IsaDefinitionError("missing or non-string 'name'", index)
    if "hex" not in record:
        raise IsaDefinitionError(f"'{name}' has no 'hex' opcode", index)

    args = record.get("args", [])
    if not isinstance(args, (list, tuple)):
        raise IsaDefinitionError(f"'{name}' args must be a list", index)

    return InstructionDef(
        name=name,
        opcode=_parse_opcode(record["hex"], index),
        args=tuple(_parse_arg(arg, index) for arg in args),
    )


def load_isa(records: Iterable[Any]) -> tuple[InstructionDef, ...]:
    """
    Convert in-memory records into an immutable instruction list.

    Example:
        >>> isa = load_isa([{"name": "NOP", "hex": "00", "args": []}])
        >>> isa[0].opcode
        0
    """
    instructions = tuple(instruction_from_dict(r, i) for i, r in enumerate(records))
    logger.debug(f"Loaded {len(instructions)} instruction definitions")
    return instructions


def load_isa_file(path: Union[str, Path]) -> tuple[InstructionDef, ...]:
    """
    Load an ISA definition from a JSON file.

    The document is either a list of records or an object whose
    "instructions" member is that list.

    Raises:
        IsaDefinitionError: If the file is not UTF-8 JSON or has the wrong shape
        OSError: If the file cannot be read
    """
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise IsaDefinitionError(f"{path}: not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise IsaDefinitionError(f"{path}: invalid JSON: {e}") from e

    if isinstance(document, dict):
        document = document.get("instructions")
    if not isinstance(document, list):
        raise IsaDefinitionError(f"{path}: expected a list of instructions")

    logger.info(f"Reading ISA definition from {path}")
    return load_isa(document)


def bundled_isa_path(name: str = DEFAULT_ISA) -> Path:
    """Path of a bundled ISA definition, e.g. "gr8cpu_r3"."""
    return DATA_DIR / f"{name}.json"


def load_bundled_isa(name: str = DEFAULT_ISA) -> tuple[InstructionDef, ...]:
    """Load one of the ISA definitions shipped with the package."""
    path = bundled_isa_path(name)
    if not path.is_file():
        raise IsaDefinitionError(f"no bundled ISA named '{name}'")
    return load_isa_file(path)
