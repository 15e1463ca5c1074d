"""
ISA Table Generation
====================

Derives assembler lookup metadata from a declarative ISA definition.

Main Components
---------------
- **definition**: InstructionDef records and ISA loaders
- **tokenizer**: word tokens and root mnemonics of syntax strings
- **keywords**: ordered, deduplicated keyword table
- **grouper**: instructions grouped by root mnemonic
- **modes**: addressing mode enumeration and surface syntax table
- **resolver**: per-instruction operand count, modes and word count
- **lookup**: per-mnemonic lookup table
- **pipeline**: all of the above in one call

Example Usage
-------------
>>> from isa_tablegen.isa import load_isa, generate_tables
>>> isa = load_isa([
...     {"name": "NOP", "hex": "00", "args": []},
...     {"name": "MOV A, %", "hex": "1D", "args": [{"type": {"bits": 8}}]},
... ])
>>> tables = generate_tables(isa)
>>> list(tables.keywords)
['nop', 'mov', 'a']
>>> tables.lookup["mov"].variants[0].word_count
1
"""

from isa_tablegen.isa.definition import (
    InstructionDef,
    OperandDef,
    instruction_from_dict,
    load_isa,
    load_isa_file,
    load_bundled_isa,
)
from isa_tablegen.isa.tokenizer import tokenize, root_mnemonic, split_mnemonic
from isa_tablegen.isa.keywords import KeywordTable, build_keywords
from isa_tablegen.isa.grouper import group_instructions
from isa_tablegen.isa.modes import AddressingMode, SURFACE_FORMS, resolve_mode
from isa_tablegen.isa.resolver import ResolvedVariant, resolve_instruction
from isa_tablegen.isa.lookup import (
    LookupEntry,
    LookupTable,
    build_lookup_table,
    validate_surface_forms,
)
from isa_tablegen.isa.pipeline import IsaTables, generate_tables
