"""
HMPI - Water Quality Classifier

Categorises a sample by its single worst metal relative to the standard
limits, and derives the quality score, standards compliance, exceedances,
usage restrictions and treatment options.

Categories (worst concentration / limit ratio):
- Excellent: <= 0.25
- Good: <= 0.5
- Fair: <= 0.75
- Poor: <= 1.0
- Unacceptable: > 1.0
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from ..utils.constants import (
    Element,
    QualityCategory,
    STANDARD_LIMITS,
    QUALITY_THRESHOLDS,
    QUALITY_RECOMMENDATIONS,
    USAGE_RESTRICTIONS,
    TREATMENT_OPTIONS,
    ELEMENT_TREATMENTS,
)
from ..utils.rounding import round_half_up
from ..utils.units import to_milligrams_per_liter
from .readings import MetalReading, as_sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StandardsCompliance:
    who: bool
    epa: bool
    national: bool
    overall_compliance: bool


@dataclass(frozen=True)
class ExceedingMetal:
    element: Element
    concentration_mg_l: float
    limit: float
    exceedance_ratio: float


@dataclass(frozen=True)
class QualityAssessment:
    category: QualityCategory
    score: float
    compliance: StandardsCompliance
    exceeding_metals: Tuple[ExceedingMetal, ...]
    recommendations: Tuple[str, ...]
    usage_restrictions: Tuple[str, ...]
    treatment_options: Tuple[str, ...]


@dataclass(frozen=True)
class BatchQualityItem:
    id: str
    assessment: QualityAssessment


def determine_quality_category(max_ratio: float) -> QualityCategory:
    for upper, category in QUALITY_THRESHOLDS:
        if max_ratio <= upper:
            return category
    return QualityCategory.UNACCEPTABLE


def calculate_quality_score(max_ratio: float) -> float:
    """
    Convert the worst concentration/limit ratio into a 0-100 score.

    Each category band below the limit maps a 0.25 ratio range onto 25
    points (slope 100). Above the limit the score decays at slope 25 and
    is floored at 0.
    """
    if max_ratio <= 0.25:
        return 100 - max_ratio * 100
    if max_ratio <= 0.5:
        return 75 - (max_ratio - 0.25) * 100
    if max_ratio <= 0.75:
        return 50 - (max_ratio - 0.5) * 100
    if max_ratio <= 1.0:
        return 25 - (max_ratio - 0.75) * 100
    return max(0.0, 25 - (max_ratio - 1.0) * 25)


def check_standards_compliance(exceeds_limit: bool) -> StandardsCompliance:
    # WHO, EPA and national limits share one table, so the flags always agree
    who = not exceeds_limit
    epa = not exceeds_limit
    national = not exceeds_limit
    return StandardsCompliance(
        who=who,
        epa=epa,
        national=national,
        overall_compliance=who and epa and national,
    )


def generate_recommendations(category: QualityCategory,
                             exceeding_metals: Iterable[ExceedingMetal]) -> List[str]:
    recommendations = list(QUALITY_RECOMMENDATIONS[category])
    for metal in exceeding_metals:
        recommendations.append(
            f"{metal.element.value} levels are {metal.exceedance_ratio:.1f}x above "
            f"safe limits - specific treatment required."
        )
    return recommendations


def generate_usage_restrictions(category: QualityCategory) -> List[str]:
    return list(USAGE_RESTRICTIONS[category])


def generate_treatment_options(category: QualityCategory,
                               exceeding_metals: Iterable[ExceedingMetal]) -> List[str]:
    """
    Category treatment list plus removal processes for exceeding metals.

    Only Pb, As, Hg, Cd and Cr have an element-specific process.
    """
    treatments = list(TREATMENT_OPTIONS[category])
    if category in (QualityCategory.EXCELLENT, QualityCategory.GOOD):
        return treatments

    for metal in exceeding_metals:
        specific = ELEMENT_TREATMENTS.get(metal.element)
        if specific:
            treatments.append(specific)
    return treatments


def assess_water_quality(readings: Iterable[MetalReading],
                         limits: Optional[Mapping[Element, float]] = None) -> QualityAssessment:
    """
    Assess groundwater quality from heavy metal readings.

    An empty reading list is treated as clean water (Excellent, score 100).

    Args:
        readings: Measured concentrations
        limits: Alternate limit table, defaults to STANDARD_LIMITS

    Returns:
        QualityAssessment for the sample
    """
    readings = list(readings)
    limits = STANDARD_LIMITS if limits is None else limits

    measured = []
    for reading in readings:
        concentration = to_milligrams_per_liter(reading.concentration, reading.unit)
        limit = limits[reading.element]
        measured.append(ExceedingMetal(
            element=reading.element,
            concentration_mg_l=concentration,
            limit=limit,
            exceedance_ratio=concentration / limit,
        ))

    if measured:
        max_ratio = max(m.exceedance_ratio for m in measured)
        category = determine_quality_category(max_ratio)
        score = calculate_quality_score(max_ratio)
    else:
        category = QualityCategory.EXCELLENT
        score = 100.0

    exceeding = sorted(
        (m for m in measured if m.exceedance_ratio > 1.0),
        key=lambda m: m.exceedance_ratio,
        reverse=True,
    )
    compliance = check_standards_compliance(
        any(m.concentration_mg_l > m.limit for m in measured)
    )

    logger.debug(f"Quality {category.value} (score {score:.2f}), {len(exceeding)} exceeding metals")

    return QualityAssessment(
        category=category,
        score=round_half_up(score),
        compliance=compliance,
        exceeding_metals=tuple(exceeding),
        recommendations=tuple(generate_recommendations(category, exceeding)),
        usage_restrictions=tuple(generate_usage_restrictions(category)),
        treatment_options=tuple(generate_treatment_options(category, exceeding)),
    )


def batch_assess_water_quality(samples: Iterable) -> List[BatchQualityItem]:
    """
    Assess each sample independently, in input order.

    The first failing sample aborts the whole batch.
    """
    results = []
    for item in samples:
        sample = as_sample(item)
        results.append(BatchQualityItem(id=sample.id, assessment=assess_water_quality(sample.readings)))
    return results
