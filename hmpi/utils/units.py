"""
HMPI - Unit Conversion Functions

Normalises heavy metal concentrations to milligrams per litre.
"""
from typing import Union

from .constants import Unit, UNIT_ALIASES, UNIT_DIVISORS


def resolve_unit(unit: Union[Unit, str]):
    """
    Map a unit string onto a known Unit.

    Returns:
        Unit member, or None when the spelling is not recognised
    """
    if isinstance(unit, Unit):
        return unit
    if unit in UNIT_ALIASES:
        return UNIT_ALIASES[unit]
    try:
        return Unit(unit)
    except ValueError:
        return None


def to_milligrams_per_liter(value: float, unit: Union[Unit, str]) -> float:
    """
    Convert a concentration to mg/L.

    ppm is taken as equal to mg/L for water, ppb as equal to µg/L.
    Unrecognised units are assumed to already be mg/L.

    Args:
        value: Concentration magnitude
        unit: Unit the value was measured in

    Returns:
        Concentration in mg/L
    """
    resolved = resolve_unit(unit)
    if resolved is None:
        return value
    return value / UNIT_DIVISORS[resolved]
