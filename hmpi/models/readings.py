"""
HMPI - Sample Readings

Input types shared by the HMPI and water quality engines.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple, Union

from ..utils.constants import Element, Unit

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when a calculation needs at least one reading and got none."""


@dataclass(frozen=True)
class MetalReading:
    """One heavy metal measurement."""

    element: Element
    concentration: float
    unit: Union[Unit, str] = Unit.MG_PER_L

    def __post_init__(self):
        # Element is a closed set; unit strings are resolved by the normalizer
        object.__setattr__(self, 'element', Element(self.element))


@dataclass(frozen=True)
class Sample:
    """A set of readings taken from one location or well."""

    id: str
    readings: Tuple[MetalReading, ...]


def parse_reading(data: Union[MetalReading, Dict[str, Any]]) -> MetalReading:
    """
    Build a MetalReading from a dict with element, concentration and unit.

    Raises:
        ValueError: If the element is not a supported heavy metal
    """
    if isinstance(data, MetalReading):
        return data
    return MetalReading(
        element=data['element'],
        concentration=float(data['concentration']),
        unit=data.get('unit', Unit.MG_PER_L),
    )


def parse_readings(rows: Iterable[Union[MetalReading, Dict[str, Any]]]) -> List[MetalReading]:
    return [parse_reading(row) for row in rows]


def filter_valid_readings(readings: Iterable[MetalReading]) -> List[MetalReading]:
    """
    Drop readings without a positive concentration.

    Blank form rows arrive as zero concentrations and should not count
    towards an assessment.
    """
    readings = list(readings)
    valid = [r for r in readings if r.concentration > 0]
    if len(valid) < len(readings):
        logger.debug(f"Dropped {len(readings) - len(valid)} non-positive readings")
    return valid


def as_sample(item: Union[Sample, Tuple[str, Iterable], Dict[str, Any]]) -> Sample:
    """
    Coerce a batch item into a Sample.

    Accepts a Sample, an (id, readings) pair, or a dict with 'id' and
    either 'readings' or 'metals'.
    """
    if isinstance(item, Sample):
        return item
    if isinstance(item, dict):
        sample_id = item['id']
        rows = item['readings'] if 'readings' in item else item['metals']
    else:
        sample_id, rows = item
    return Sample(id=sample_id, readings=tuple(parse_readings(rows)))
