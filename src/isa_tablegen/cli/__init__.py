"""
ISA Table Generator Command-Line Interface
==========================================

- **isagen**: generate keyword and lookup tables from an ISA definition

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["isagen"]
