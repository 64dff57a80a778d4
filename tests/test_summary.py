"""
Batch summary tests
"""
import pytest

from hmpi.models.hmpi_calculator import calculate_batch_hmpi
from hmpi.models.quality_classifier import batch_assess_water_quality
from hmpi.models.summary import (
    hmpi_results_to_frame,
    quality_results_to_frame,
    summarize_hmpi_batch,
    summarize_quality_batch,
)


@pytest.fixture
def samples(lead_sample, copper_sample, contaminated_sample):
    return [
        ("lead", lead_sample),
        ("copper", copper_sample),
        ("contaminated", contaminated_sample),
    ]


def test_hmpi_frame(samples):
    df = hmpi_results_to_frame(calculate_batch_hmpi(samples))

    assert list(df['id']) == ["lead", "copper", "contaminated"]
    assert list(df['risk_level']) == ["Moderate", "Low", "Very High"]
    assert df.loc[2, 'worst_element'] == "Pb"


def test_hmpi_summary(samples):
    summary = summarize_hmpi_batch(calculate_batch_hmpi(samples))

    assert summary['total_samples'] == 3
    assert summary['risk_distribution'] == {
        'Low': 1, 'Moderate': 1, 'High': 0, 'Very High': 1
    }
    assert summary['unsafe_count'] == 1
    assert summary['max_hmpi'] == pytest.approx(313.64)


def test_quality_summary(samples):
    items = batch_assess_water_quality(samples)
    summary = summarize_quality_batch(items)

    assert summary['total_samples'] == 3
    assert summary['category_distribution']['Unacceptable'] == 2
    assert summary['category_distribution']['Excellent'] == 1
    assert summary['compliant_count'] == 1
    assert summary['min_score'] == 0
    assert summary['mean_score'] == pytest.approx(round(95 / 3, 2))

    df = quality_results_to_frame(items)
    assert df.loc[1, 'worst_element'] is None
    assert df.loc[2, 'exceeding_count'] == 3


def test_empty_batch_summaries():
    assert summarize_hmpi_batch([]) == {
        'total_samples': 0,
        'risk_distribution': {'Low': 0, 'Moderate': 0, 'High': 0, 'Very High': 0},
        'mean_hmpi': 0.0,
        'max_hmpi': 0.0,
        'unsafe_count': 0,
    }
    summary = summarize_quality_batch([])
    assert summary['total_samples'] == 0
    assert summary['compliant_count'] == 0
    assert sum(summary['category_distribution'].values()) == 0
