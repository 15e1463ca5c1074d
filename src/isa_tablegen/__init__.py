"""
ISA Table Generator
===================

This package derives the static lookup tables an assembler needs from a
declarative instruction set definition: a list of syntax patterns such as
"MOV A, X[%]" paired with opcodes and operand widths.

Generated Artifacts
-------------------
- **Keyword table**: every word of the instruction set, deduplicated,
  mnemonics first, with a symbolic identifier per keyword
- **Lookup table**: for each mnemonic, every variant's opcode, operand
  count, operand addressing modes and word count
- **Syntax listing**: human-readable instruction forms per mnemonic

Quick Start
-----------
Generate tables for the bundled GR8CPU Rev3 instruction set:
    >>> from isa_tablegen import load_bundled_isa, generate_tables
    >>> tables = generate_tables(load_bundled_isa())
    >>> len(tables.keywords), len(tables.lookup)
    (52, 46)

Render them as C source:
    >>> from isa_tablegen.emit import emit_c_source
    >>> source = emit_c_source(tables)

Or use the command-line tool:
    $ isagen isa.json -o r3_tables.c --listing r3_syntax.txt
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from isa_tablegen.config import GeneratorConfig
from isa_tablegen.errors import (
    IsaError,
    IsaDefinitionError,
    TableBuildError,
    MalformedSyntaxError,
    UnknownAddressingModeError,
    OperandArityError,
    OperandWidthError,
)
from isa_tablegen.isa import (
    InstructionDef,
    OperandDef,
    load_isa,
    load_isa_file,
    load_bundled_isa,
    tokenize,
    root_mnemonic,
    KeywordTable,
    build_keywords,
    group_instructions,
    AddressingMode,
    ResolvedVariant,
    resolve_instruction,
    LookupEntry,
    LookupTable,
    build_lookup_table,
    IsaTables,
    generate_tables,
)

__all__ = [
    "__version__",
    # Configuration
    "GeneratorConfig",
    # Exception hierarchy
    "IsaError",
    "IsaDefinitionError",
    "TableBuildError",
    "MalformedSyntaxError",
    "UnknownAddressingModeError",
    "OperandArityError",
    "OperandWidthError",
    # ISA definitions
    "InstructionDef",
    "OperandDef",
    "load_isa",
    "load_isa_file",
    "load_bundled_isa",
    # Pipeline stages
    "tokenize",
    "root_mnemonic",
    "KeywordTable",
    "build_keywords",
    "group_instructions",
    "AddressingMode",
    "ResolvedVariant",
    "resolve_instruction",
    "LookupEntry",
    "LookupTable",
    "build_lookup_table",
    "IsaTables",
    "generate_tables",
]
