"""
HMPI - Heavy Metal Pollution Index Calculator

Computes per-metal sub-indices, the toxicity-weighted pollution index,
its risk level and the matching recommendations.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from ..utils.constants import (
    Element,
    RiskLevel,
    STANDARD_LIMITS,
    METAL_WEIGHTS,
    DEFAULT_METAL_WEIGHT,
    RISK_THRESHOLDS,
    SUB_INDEX_EXCEEDS,
    SUB_INDEX_CRITICAL,
    HMPI_RECOMMENDATIONS,
)
from ..utils.rounding import round_half_up
from ..utils.units import to_milligrams_per_liter
from .readings import EmptyInputError, MetalReading, as_sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubIndex:
    element: Element
    concentration_mg_l: float
    standard_limit: float
    sub_index: float
    contribution_percent: float


@dataclass(frozen=True)
class HMPIResult:
    overall_hmpi: float
    risk_level: RiskLevel
    sub_indices: Tuple[SubIndex, ...]
    recommendations: Tuple[str, ...]


@dataclass(frozen=True)
class BatchHMPIItem:
    id: str
    result: HMPIResult


def calculate_sub_index(concentration_mg_l: float, standard_limit: float) -> float:
    """Concentration as a percentage of its standard limit."""
    return (concentration_mg_l / standard_limit) * 100


def determine_risk_level(hmpi: float) -> RiskLevel:
    for upper, level in RISK_THRESHOLDS:
        if hmpi <= upper:
            return level
    return RiskLevel.VERY_HIGH


def generate_recommendations(risk_level: RiskLevel,
                             sub_indices: Iterable[SubIndex]) -> List[str]:
    """
    Build the advisory list for an HMPI result.

    Args:
        risk_level: Overall risk level
        sub_indices: Sub-indices in reporting order (worst first)

    Returns:
        Base messages for the risk level followed by one line per metal
        above its safe limit
    """
    recommendations = list(HMPI_RECOMMENDATIONS[risk_level])

    for metal in sub_indices:
        symbol = metal.element.value
        if metal.sub_index > SUB_INDEX_CRITICAL:
            recommendations.append(
                f"{symbol} levels are critically high - specific treatment "
                f"for {symbol} removal required."
            )
        elif metal.sub_index > SUB_INDEX_EXCEEDS:
            recommendations.append(
                f"{symbol} exceeds safe limits - monitoring and treatment recommended."
            )

    return recommendations


def calculate_hmpi(readings: Iterable[MetalReading],
                   limits: Optional[Mapping[Element, float]] = None,
                   weights: Optional[Mapping[Element, float]] = None) -> HMPIResult:
    """
    Calculate the Heavy Metal Pollution Index for one sample.

    HMPI = sum(Si * Wi) / sum(Wi), with Si = C / limit * 100.

    Args:
        readings: Measured concentrations (zero readings should be
            filtered out by the caller)
        limits: Alternate limit table, defaults to STANDARD_LIMITS
        weights: Alternate weight table, defaults to METAL_WEIGHTS

    Returns:
        HMPIResult with sub-indices sorted worst first

    Raises:
        EmptyInputError: If no readings are given
    """
    readings = list(readings)
    if not readings:
        raise EmptyInputError("No heavy metal data provided")

    limits = STANDARD_LIMITS if limits is None else limits
    weights = METAL_WEIGHTS if weights is None else weights

    rows = []
    for reading in readings:
        concentration = to_milligrams_per_liter(reading.concentration, reading.unit)
        standard_limit = limits[reading.element]
        # Only reachable with a custom weight table missing an element
        weight = weights.get(reading.element, DEFAULT_METAL_WEIGHT)
        sub_index = calculate_sub_index(concentration, standard_limit)
        rows.append((reading.element, concentration, standard_limit, sub_index, weight))

    total_weighted_index = sum(row[3] * row[4] for row in rows)
    total_weight = sum(row[4] for row in rows)
    overall_hmpi = total_weighted_index / total_weight

    sub_indices = []
    for element, concentration, standard_limit, sub_index, weight in rows:
        if total_weighted_index > 0:
            contribution = (sub_index * weight) / total_weighted_index * 100
        else:
            contribution = 0.0
        sub_indices.append(SubIndex(
            element=element,
            concentration_mg_l=concentration,
            standard_limit=standard_limit,
            sub_index=sub_index,
            contribution_percent=contribution,
        ))

    # Stable sort, worst contributor first
    sub_indices.sort(key=lambda s: s.sub_index, reverse=True)

    overall_hmpi = round_half_up(overall_hmpi)
    risk_level = determine_risk_level(overall_hmpi)
    logger.debug(f"HMPI {overall_hmpi} ({risk_level.value}) from {len(rows)} readings")

    return HMPIResult(
        overall_hmpi=overall_hmpi,
        risk_level=risk_level,
        sub_indices=tuple(sub_indices),
        recommendations=tuple(generate_recommendations(risk_level, sub_indices)),
    )


def calculate_batch_hmpi(samples: Iterable) -> List[BatchHMPIItem]:
    """
    Calculate HMPI for each sample, in input order.

    The first failing sample aborts the whole batch.
    """
    results = []
    for item in samples:
        sample = as_sample(item)
        results.append(BatchHMPIItem(id=sample.id, result=calculate_hmpi(sample.readings)))
    return results
