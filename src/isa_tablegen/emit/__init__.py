"""
Table Emitters
==============

Renderers that turn generated tables into text:

- **c_source**: C definitions for the inline assembler (keyword array,
  keyword enum, mode defines, instruction lookup table)
- **listing**: human-readable operand syntax listing per mnemonic
"""

from isa_tablegen.emit.listing import (
    describe_syntax,
    build_syntax_listing,
    emit_syntax_listing,
)
from isa_tablegen.emit.c_source import (
    emit_mode_defines,
    emit_keyword_array,
    emit_keyword_enum,
    emit_lookup_table,
    emit_c_source,
)

__all__ = [
    "describe_syntax",
    "build_syntax_listing",
    "emit_syntax_listing",
    "emit_mode_defines",
    "emit_keyword_array",
    "emit_keyword_enum",
    "emit_lookup_table",
    "emit_c_source",
]
