"""
Shared fixtures for the HMPI test suite.
"""
import pytest

from hmpi.models.readings import MetalReading


@pytest.fixture
def lead_sample():
    """Single lead reading at twice its limit."""
    return [MetalReading("Pb", 0.02, "mg/L")]


@pytest.fixture
def copper_sample():
    """Single copper reading well below its limit."""
    return [MetalReading("Cu", 0.1, "mg/L")]


@pytest.fixture
def mixed_sample():
    """Cadmium above its limit, lead and copper below."""
    return [
        MetalReading("Pb", 0.004, "mg/L"),
        MetalReading("Cd", 9, "µg/L"),
        MetalReading("Cu", 1.2, "ppm"),
    ]


@pytest.fixture
def contaminated_sample():
    """Three metals above their limits."""
    return [
        MetalReading("Hg", 0.009, "mg/L"),
        MetalReading("Pb", 0.05, "mg/L"),
        MetalReading("Zn", 6.0, "mg/L"),
    ]
