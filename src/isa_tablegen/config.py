"""
Generator Configuration
=======================

Settings that control how the generated tables are rendered. They never
affect the resolved data, only names and layout of the emitted source.
Configuration can come from:
- Default values (defined here)
- Environment variables (GeneratorConfig.from_env)
- Command-line options (isagen)
"""

import os
import re
from dataclasses import dataclass, replace
from typing import Optional

_IDENTIFIER = re.compile(r"^[A-Za-z_]\w*$")


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Emission settings.

    Attributes:
        prefix: Lowercase prefix of generated C names (default: "r3",
            giving r3_iasm_keyw, r3_insn_lut, ...)
        keyword_prefix: Prefix of keyword enum identifiers (default:
            PREFIX upper-cased + "_KEYW_", i.e. "R3_KEYW_")
        keywords_per_row: Keywords per line in the emitted arrays (default: 4)
        indent: Indentation used in emitted source (default: tab)
    """
    prefix: str = "r3"
    keyword_prefix: Optional[str] = None
    keywords_per_row: int = 4
    indent: str = "\t"

    def __post_init__(self) -> None:
        if not _IDENTIFIER.match(self.prefix):
            raise ValueError(f"prefix must be a C identifier, got {self.prefix!r}")
        if self.keywords_per_row < 1:
            raise ValueError("keywords_per_row must be at least 1")

    @property
    def keyword_identifier_prefix(self) -> str:
        if self.keyword_prefix is not None:
            return self.keyword_prefix
        return f"{self.prefix.upper()}_KEYW_"

    def with_overrides(self, **changes) -> "GeneratorConfig":
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """
        Create GeneratorConfig from environment variables.

        Environment variables (all optional):
            ISAGEN_PREFIX: C name prefix
            ISAGEN_KEYWORDS_PER_ROW: Keywords per emitted line (integer)

        Raises:
            ValueError: If a variable holds an invalid value
        """
        changes = {}
        if prefix := os.environ.get("ISAGEN_PREFIX"):
            changes["prefix"] = prefix
        if per_row := os.environ.get("ISAGEN_KEYWORDS_PER_ROW"):
            try:
                changes["keywords_per_row"] = int(per_row)
            except ValueError:
                raise ValueError(
                    f"ISAGEN_KEYWORDS_PER_ROW must be an integer, got {per_row!r}"
                ) from None
        return cls(**changes)
