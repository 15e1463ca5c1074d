"""
Table Generation Pipeline
=========================

Runs every stage over one instruction set and returns all generated
artifacts together:

    instructions ─┬─> build_keywords ─────────────────────> keywords
                  ├─> group_instructions ─┬─> build_lookup_table -> lookup
                  │                       └─> build_syntax_listing -> listing
                  └─> validate_surface_forms (runs first)

The pipeline is a pure function of its input: the same instruction list
always gives equal tables, and nothing is built when any instruction is
invalid.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from isa_tablegen.emit.listing import build_syntax_listing
from isa_tablegen.isa.definition import InstructionDef
from isa_tablegen.isa.grouper import InstructionGroups, group_instructions
from isa_tablegen.isa.keywords import KeywordTable, build_keywords
from isa_tablegen.isa.lookup import LookupTable, build_lookup_table, validate_surface_forms

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IsaTables:
    """Everything generated from one ISA definition."""
    instructions: tuple[InstructionDef, ...]
    keywords: KeywordTable
    groups: InstructionGroups
    lookup: LookupTable
    syntax_listing: Mapping[str, tuple[str, ...]]


def generate_tables(instructions: Iterable[InstructionDef]) -> IsaTables:
    """
    Build keyword table, lookup table and syntax listing for an ISA.

    Raises:
        TableBuildError: If any instruction fails to resolve
    """
    instructions = tuple(instructions)
    logger.debug(f"Generating tables for {len(instructions)} instructions")

    validate_surface_forms(instructions)

    keywords = build_keywords(instructions)
    groups = group_instructions(instructions)
    lookup = build_lookup_table(groups)
    listing = build_syntax_listing(groups)

    logger.info(
        f"Generated {len(keywords)} keywords and {len(lookup)} lookup entries "
        f"({lookup.variant_count} variants)"
    )
    return IsaTables(instructions, keywords, groups, lookup, listing)
