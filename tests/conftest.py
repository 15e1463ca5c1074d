# =============================================================================
# conftest.py - Shared fixtures
# =============================================================================

import pytest

from isa_tablegen.isa import generate_tables, load_bundled_isa, load_isa


@pytest.fixture
def small_isa():
    """A handful of instructions covering 0, 1 and 2 operand forms."""
    return load_isa([
        {"name": "NOP", "hex": "00", "args": []},
        {"name": "PSH A", "hex": "04", "args": []},
        {"name": "PSH %", "hex": "07", "args": [{"type": {"bits": 8}}]},
        {"name": "MOV A, X", "hex": "17", "args": []},
        {"name": "MOV A, [%]", "hex": "20", "args": [{"type": {"bits": 16}}]},
        {"name": "PSH [%]", "hex": "08", "args": [{"type": {"bits": 16}}]},
        {"name": "JMP (%)", "hex": "6D", "args": [{"type": {"bits": 16}}]},
    ])


@pytest.fixture(scope="session")
def r3_isa():
    """The bundled GR8CPU Rev3 instruction set."""
    return load_bundled_isa()


@pytest.fixture(scope="session")
def r3_tables(r3_isa):
    return generate_tables(r3_isa)
