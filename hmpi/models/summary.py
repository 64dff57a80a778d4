"""
HMPI - Batch Summaries

Tabulates batch results and reports risk / category distributions.
"""
from typing import Dict, Iterable

import numpy as np
import pandas as pd

from ..utils.constants import RiskLevel, QualityCategory
from ..utils.rounding import round_half_up
from .hmpi_calculator import BatchHMPIItem
from .quality_classifier import BatchQualityItem

UNSAFE_RISK_LEVELS = (RiskLevel.HIGH.value, RiskLevel.VERY_HIGH.value)

HMPI_COLUMNS = ['id', 'overall_hmpi', 'risk_level', 'worst_element', 'worst_sub_index']
QUALITY_COLUMNS = ['id', 'category', 'score', 'compliant', 'exceeding_count', 'worst_element']


def hmpi_results_to_frame(items: Iterable[BatchHMPIItem]) -> pd.DataFrame:
    """One row per sample, worst sub-index alongside the overall index."""
    rows = []
    for item in items:
        worst = item.result.sub_indices[0]
        rows.append({
            'id': item.id,
            'overall_hmpi': item.result.overall_hmpi,
            'risk_level': item.result.risk_level.value,
            'worst_element': worst.element.value,
            'worst_sub_index': worst.sub_index,
        })
    return pd.DataFrame(rows, columns=HMPI_COLUMNS)


def quality_results_to_frame(items: Iterable[BatchQualityItem]) -> pd.DataFrame:
    rows = []
    for item in items:
        assessment = item.assessment
        worst = assessment.exceeding_metals[0].element.value if assessment.exceeding_metals else None
        rows.append({
            'id': item.id,
            'category': assessment.category.value,
            'score': assessment.score,
            'compliant': assessment.compliance.overall_compliance,
            'exceeding_count': len(assessment.exceeding_metals),
            'worst_element': worst,
        })
    return pd.DataFrame(rows, columns=QUALITY_COLUMNS)


def _distribution(series: pd.Series, labels) -> Dict[str, int]:
    counts = series.value_counts()
    return {label.value: int(counts.get(label.value, 0)) for label in labels}


def _stat(series: pd.Series, func) -> float:
    if series.empty:
        return 0.0
    return round_half_up(float(func(series.values)))


def summarize_hmpi_batch(items: Iterable[BatchHMPIItem]) -> Dict:
    """
    Summary statistics of a batch HMPI run.

    Returns:
        Dict with total_samples, risk_distribution, mean_hmpi, max_hmpi
        and unsafe_count (High or Very High samples)
    """
    df = hmpi_results_to_frame(items)

    return {
        'total_samples': len(df),
        'risk_distribution': _distribution(df['risk_level'], RiskLevel),
        'mean_hmpi': _stat(df['overall_hmpi'], np.mean),
        'max_hmpi': _stat(df['overall_hmpi'], np.max),
        'unsafe_count': int(df['risk_level'].isin(UNSAFE_RISK_LEVELS).sum()),
    }


def summarize_quality_batch(items: Iterable[BatchQualityItem]) -> Dict:
    """
    Summary statistics of a batch quality assessment.

    Returns:
        Dict with total_samples, category_distribution, mean_score,
        min_score and compliant_count
    """
    df = quality_results_to_frame(items)

    return {
        'total_samples': len(df),
        'category_distribution': _distribution(df['category'], QualityCategory),
        'mean_score': _stat(df['score'], np.mean),
        'min_score': _stat(df['score'], np.min),
        'compliant_count': int(df['compliant'].astype(bool).sum()),
    }
