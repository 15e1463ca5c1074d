"""
C Source Emitter
================

Renders generated tables as C source for the inline assembler:

- ``#define A_<MODE> 0x..`` for every addressing mode encoding
- the keyword token enum (``R3_KEYW_BKI, ...``) and keyword counts
- the keyword string array (``char *r3_iasm_keyw[]``)
- the instruction lookup table (``r3_iasm_modes_t r3_insn_lut[]``)

Keyword arrays are laid out in aligned columns, ``keywords_per_row`` per
line. Output is deterministic: equal tables render to identical text.
"""

from typing import TYPE_CHECKING, Optional

from isa_tablegen.config import GeneratorConfig
from isa_tablegen.isa.keywords import KeywordTable
from isa_tablegen.isa.lookup import LookupTable
from isa_tablegen.isa.modes import AddressingMode
from isa_tablegen.isa.resolver import ResolvedVariant

if TYPE_CHECKING:
    from isa_tablegen.isa.pipeline import IsaTables


def _columns(items: list[str], per_row: int, indent: str) -> list[str]:
    """Lay items out in rows of per_row, padded to a common width."""
    if not items:
        return []
    width = max(len(item) for item in items) + 1
    lines = []
    for start in range(0, len(items), per_row):
        row = items[start:start + per_row]
        lines.append(indent + "".join(item.ljust(width) for item in row).rstrip())
    return lines


def emit_mode_defines() -> str:
    """``#define`` line for every addressing mode, in encoding order."""
    width = max(len(mode.tag) for mode in AddressingMode) + 1
    lines = [
        f"#define {mode.tag.ljust(width)}0x{mode.value:02X}"
        for mode in sorted(AddressingMode, key=int)
    ]
    return "\n".join(lines) + "\n"


def emit_keyword_array(keywords: KeywordTable, config: Optional[GeneratorConfig] = None) -> str:
    """
    The keyword string array.

    Example output:
        // All keywords that occur.
        char *r3_iasm_keyw[] = {
        	"bki",  "brk",  "call", "ret",
        };
    """
    config = config or GeneratorConfig()
    items = [f'"{keyword}",' for keyword in keywords]
    lines = ["// All keywords that occur.", f"char *{config.prefix}_iasm_keyw[] = {{"]
    lines.extend(_columns(items, config.keywords_per_row, config.indent))
    lines.append("};")
    return "\n".join(lines) + "\n"


def emit_keyword_enum(keywords: KeywordTable, config: Optional[GeneratorConfig] = None) -> str:
    """
    The keyword token enum, parallel to the keyword array, plus the
    mnemonic and keyword counts the lexer needs.
    """
    config = config or GeneratorConfig()
    prefix = config.prefix
    upper = prefix.upper()
    items = [f"{ident}," for ident in keywords.identifiers(config.keyword_identifier_prefix)]

    lines = [f"typedef enum {prefix}_iasm_keyw_id {{", f"{config.indent}// Keyword tokens."]
    lines.extend(_columns(items, config.keywords_per_row, config.indent))
    lines.append(f"}} {prefix}_iasm_keyw_id_t;")
    lines.append("")
    lines.append(f"#define {upper}_TKN_INSN_KEYWORDS {keywords.mnemonic_count}")
    lines.append(f"#define {upper}_NUM_KEYW {len(keywords)}")
    return "\n".join(lines) + "\n"


def _variant_line(variant: ResolvedVariant) -> str:
    fields = (
        f".n_args={variant.operand_count}, .opcode=0x{variant.opcode:02X}, "
        f".n_words={variant.word_count}"
    )
    if variant.modes:
        tags = ", ".join(mode.tag for mode in variant.modes)
        fields += f", .arg_modes={{{tags}}}"
    return f"{{ {fields}}},"


def emit_lookup_table(lookup: LookupTable, config: Optional[GeneratorConfig] = None) -> str:
    """
    The per-mnemonic lookup table.

    Example output:
        r3_iasm_modes_t r3_insn_lut[1] = {
        	{ // call
        		.num = 2, .modes = (r3_iasm_mode_t[]) {
        			{ .n_args=1, .opcode=0x02, .n_words=2, .arg_modes={A_IMM}},
        			{ .n_args=1, .opcode=0x6C, .n_words=2, .arg_modes={A_PTR}},
        		}
        	},
        };
    """
    config = config or GeneratorConfig()
    prefix = config.prefix
    i1, i2, i3 = (config.indent * n for n in (1, 2, 3))

    lines = [
        "// Addressing modes belonging to instructions.",
        f"{prefix}_iasm_modes_t {prefix}_insn_lut[{len(lookup)}] = {{",
    ]
    for entry in lookup.values():
        lines.append(f"{i1}{{ // {entry.mnemonic}")
        lines.append(f"{i2}.num = {entry.count}, .modes = ({prefix}_iasm_mode_t[]) {{")
        lines.extend(f"{i3}{_variant_line(variant)}" for variant in entry.variants)
        lines.append(f"{i2}}}")
        lines.append(f"{i1}}},")
    lines.append("};")
    return "\n".join(lines) + "\n"


def emit_c_source(tables: "IsaTables", config: Optional[GeneratorConfig] = None) -> str:
    """Complete generated C source: mode defines, keywords and lookup table."""
    config = config or GeneratorConfig()
    sections = [
        "// Generated by isagen. Do not edit.\n",
        emit_mode_defines(),
        emit_keyword_enum(tables.keywords, config),
        emit_keyword_array(tables.keywords, config),
        emit_lookup_table(tables.lookup, config),
    ]
    return "\n".join(sections)
