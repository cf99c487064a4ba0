"""Shared test fixtures for unitsafe."""

import pytest

from unitsafe.registry import Registry

DEFINITIONS = """
# SI base units and a few derived ones
unit meter {
    dimension: length
    transformation: identity
    prefixes: standard
}
unit gram {
    dimension: mass
    transformation: linear(scale: 1e-3)
    prefixes: [kilo, milli, micro]
}
unit second {
    dimension: time
    transformation: identity
    prefixes: [milli, micro, nano]
}
unit minute {
    dimension: time
    transformation: linear(scale: 60)
    prefixes: no
}
unit newton {
    dimension: mass * length / time^2
    transformation: identity
    prefixes: standard
}
unit foot {
    dimension: length
    transformation: linear(scale: 0.3048, offset: 0)
    prefixes: no
}
unit kelvin {
    dimension: temperature
    transformation: identity
    prefixes: no
}
unit degree_celsius {
    dimension: temperature
    transformation: linear(scale: 1, offset: 273.15)
    prefixes: no
}
unit ratio {
    dimension: count
    transformation: identity
    prefixes: no
}
unit decibel {
    dimension: count
    transformation: decibel(p0: 1)
    prefixes: no
}
"""


@pytest.fixture
def definitions():
    """Unit-definition source used across the suite."""
    return DEFINITIONS


@pytest.fixture
def registry():
    """Registry loaded from the shared definitions."""
    return Registry.new_from_source(DEFINITIONS)


@pytest.fixture
def definitions_file(tmp_path):
    """The shared definitions written to a temporary file."""
    path = tmp_path / "units.txt"
    path.write_text(DEFINITIONS, encoding="utf-8")
    return path
