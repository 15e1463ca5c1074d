"""
isagen - ISA Table Generator Command-Line Interface
===================================================

This module implements the command-line interface for the table generator.
It reads an ISA definition (JSON) and writes the keyword table, the
instruction lookup table and the operand syntax listing.

Usage Examples
--------------
Generate C tables for the bundled GR8CPU Rev3 definition:
    $ isagen

From a definition file, into a file:
    $ isagen cpu.json -o cpu_tables.c

Also write the syntax listing:
    $ isagen cpu.json -o cpu_tables.c --listing cpu_syntax.txt

Print only the syntax listing or a summary:
    $ isagen cpu.json --format listing
    $ isagen cpu.json --format summary

Custom C name prefix:
    $ isagen cpu.json --prefix cpu
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from isa_tablegen import __version__
from isa_tablegen.config import GeneratorConfig
from isa_tablegen.cli.errors import handle_cli_exception
from isa_tablegen.emit import emit_c_source, emit_syntax_listing
from isa_tablegen.isa import IsaTables, generate_tables, load_bundled_isa, load_isa_file

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
        stream=sys.stderr,
    )


def format_summary(tables: IsaTables) -> str:
    """One line per mnemonic with its variant count, plus totals."""
    lines = [
        f"Instructions: {len(tables.instructions)}",
        f"Keywords:     {len(tables.keywords)} ({tables.keywords.mnemonic_count} mnemonics)",
        f"Lookup:       {len(tables.lookup)} entries, {tables.lookup.variant_count} variants",
        "",
    ]
    for index, entry in enumerate(tables.lookup.values()):
        modes = sorted({mode.name for v in entry.variants for mode in v.modes})
        mode_str = ", ".join(modes) if modes else "-"
        lines.append(f"  {index:3d}  {entry.mnemonic:<6} {entry.count:3d}  {mode_str}")
    return "\n".join(lines) + "\n"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "isa_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-l", "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the operand syntax listing to this file",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["c", "listing", "summary"], case_sensitive=False),
    default="c",
    help="What to write to the output. Default: c",
)
@click.option(
    "-p", "--prefix",
    default=None,
    help="Prefix of generated C names (default: r3, or $ISAGEN_PREFIX)",
)
@click.option(
    "-k", "--keywords-per-row",
    type=click.IntRange(min=1),
    default=None,
    help="Keywords per line in the emitted arrays (default: 4)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="isagen")
def main(
    isa_file: Optional[Path],
    output: Optional[Path],
    listing: Optional[Path],
    output_format: str,
    prefix: Optional[str],
    keywords_per_row: Optional[int],
    verbose: bool,
) -> None:
    """
    Generate assembler keyword and lookup tables from an ISA definition.

    ISA_FILE is a JSON list of {"name", "hex", "args"} instruction records,
    or an object holding that list under "instructions". Without ISA_FILE
    the bundled GR8CPU Rev3 definition is used.

    \b
    Examples:
        isagen                          # Bundled ISA, C to stdout
        isagen cpu.json -o tables.c     # Specify output file
        isagen cpu.json -f listing      # Syntax listing only
    """
    setup_logging(verbose)

    try:
        try:
            config = GeneratorConfig.from_env().with_overrides(
                prefix=prefix, keywords_per_row=keywords_per_row
            )
        except ValueError as e:
            raise click.BadParameter(str(e)) from e

        if isa_file is None:
            logger.info("No ISA file given, using bundled GR8CPU Rev3 definition")
            instructions = load_bundled_isa()
        else:
            instructions = load_isa_file(isa_file)

        tables = generate_tables(instructions)

        output_format = output_format.lower()
        if output_format == "listing":
            text = emit_syntax_listing(tables.syntax_listing)
        elif output_format == "summary":
            text = format_summary(tables)
        else:
            text = emit_c_source(tables, config)

        if output is None:
            click.echo(text, nl=False)
        else:
            output.write_text(text, encoding="utf-8")
            logger.info(f"Wrote {output_format} output to {output}")

        if listing:
            listing.write_text(emit_syntax_listing(tables.syntax_listing), encoding="utf-8")
            logger.info(f"Wrote syntax listing to {listing}")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Generation")


if __name__ == "__main__":
    main()
