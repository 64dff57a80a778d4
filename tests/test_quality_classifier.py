"""
Water Quality Classifier Tests

Covers category thresholds, the piecewise quality score, compliance
flags, exceedances, advisory lists and batch runs.
"""
import pytest

from hmpi.models.readings import MetalReading
from hmpi.models.quality_classifier import (
    assess_water_quality,
    batch_assess_water_quality,
    calculate_quality_score,
    determine_quality_category,
)
from hmpi.utils.constants import (
    Element,
    QualityCategory,
    QUALITY_RECOMMENDATIONS,
    USAGE_RESTRICTIONS,
    TREATMENT_OPTIONS,
    ELEMENT_TREATMENTS,
)


# ==================== Categories and score ====================

@pytest.mark.parametrize("ratio, expected", [
    (0.0, QualityCategory.EXCELLENT),
    (0.25, QualityCategory.EXCELLENT),
    (0.26, QualityCategory.GOOD),
    (0.5, QualityCategory.GOOD),
    (0.6, QualityCategory.FAIR),
    (0.75, QualityCategory.FAIR),
    (0.9, QualityCategory.POOR),
    (1.0, QualityCategory.POOR),
    (1.01, QualityCategory.UNACCEPTABLE),
    (40, QualityCategory.UNACCEPTABLE),
])
def test_category_thresholds(ratio, expected):
    assert determine_quality_category(ratio) is expected


@pytest.mark.parametrize("ratio, expected", [
    (0.0, 100),
    (0.1, 90),
    (0.4, 60),
    (0.6, 40),
    (0.9, 10),
    (1.0, 0),
    (1.5, 12.5),
    (2.0, 0),
    (9.0, 0),
])
def test_quality_score_segments(ratio, expected):
    assert calculate_quality_score(ratio) == pytest.approx(expected)


@pytest.mark.parametrize("breakpoint, expected", [(0.25, 75), (0.5, 50), (0.75, 25)])
def test_quality_score_continuous_below_limit(breakpoint, expected):
    eps = 1e-9
    assert calculate_quality_score(breakpoint - eps) == pytest.approx(expected)
    assert calculate_quality_score(breakpoint) == pytest.approx(expected)
    assert calculate_quality_score(breakpoint + eps) == pytest.approx(expected)


def test_score_above_limit_decays_slower():
    # slope 25 above the limit, 100 below it
    below = calculate_quality_score(0.8) - calculate_quality_score(0.9)
    above = calculate_quality_score(1.1) - calculate_quality_score(1.2)
    assert below == pytest.approx(10)
    assert above == pytest.approx(2.5)


def test_score_never_negative():
    assert calculate_quality_score(100) == 0


# ==================== Assessments ====================

def test_empty_input_default():
    assessment = assess_water_quality([])

    assert assessment.category is QualityCategory.EXCELLENT
    assert assessment.score == 100
    assert assessment.exceeding_metals == ()
    compliance = assessment.compliance
    assert compliance.who and compliance.epa and compliance.national
    assert compliance.overall_compliance
    assert list(assessment.recommendations) == list(QUALITY_RECOMMENDATIONS[QualityCategory.EXCELLENT])


def test_lead_sample_unacceptable(lead_sample):
    assessment = assess_water_quality(lead_sample)

    assert assessment.category is QualityCategory.UNACCEPTABLE
    assert assessment.score == 0
    assert not assessment.compliance.overall_compliance
    assert assessment.exceeding_metals[0].exceedance_ratio == pytest.approx(2.0)


def test_copper_sample_excellent(copper_sample):
    assessment = assess_water_quality(copper_sample)

    assert assessment.category is QualityCategory.EXCELLENT
    assert assessment.score == pytest.approx(95)
    assert assessment.compliance.overall_compliance
    assert list(assessment.treatment_options) == list(TREATMENT_OPTIONS[QualityCategory.EXCELLENT])


def test_worst_metal_dominates():
    readings = [
        MetalReading("Cu", 0.01),
        MetalReading("Zn", 0.01),
        MetalReading("Ni", 0.042),  # ratio 0.6
    ]
    assessment = assess_water_quality(readings)

    assert assessment.category is QualityCategory.FAIR
    assert assessment.score == pytest.approx(40)
    assert assessment.exceeding_metals == ()
    assert list(assessment.usage_restrictions) == list(USAGE_RESTRICTIONS[QualityCategory.FAIR])


def test_units_are_normalised():
    assert assess_water_quality([MetalReading("Pb", 2, "µg/L")]).category is QualityCategory.EXCELLENT
    assert assess_water_quality([MetalReading("As", 6, "ppb")]).category is QualityCategory.FAIR


def test_poor_within_limits_is_compliant():
    assessment = assess_water_quality([MetalReading("As", 0.009)])

    assert assessment.category is QualityCategory.POOR
    assert assessment.score == pytest.approx(10)
    assert assessment.compliance.overall_compliance
    assert list(assessment.treatment_options) == list(TREATMENT_OPTIONS[QualityCategory.POOR])


def test_compliance_flags_agree(contaminated_sample):
    compliance = assess_water_quality(contaminated_sample).compliance

    assert compliance.who is compliance.epa is compliance.national is False
    assert compliance.overall_compliance is False


def test_exceeding_metals_sorted(contaminated_sample):
    assessment = assess_water_quality(contaminated_sample)

    assert [m.element for m in assessment.exceeding_metals] == [Element.PB, Element.ZN, Element.HG]
    ratios = [m.exceedance_ratio for m in assessment.exceeding_metals]
    assert ratios == pytest.approx([5.0, 2.0, 1.5])
    assert assessment.exceeding_metals[0].limit == 0.01


def test_exceedance_recommendations(contaminated_sample):
    recommendations = assess_water_quality(contaminated_sample).recommendations

    assert recommendations[-3:] == (
        "Pb levels are 5.0x above safe limits - specific treatment required.",
        "Zn levels are 2.0x above safe limits - specific treatment required.",
        "Hg levels are 1.5x above safe limits - specific treatment required.",
    )


def test_element_specific_treatments(contaminated_sample):
    treatments = assess_water_quality(contaminated_sample).treatment_options

    assert list(treatments[:4]) == list(TREATMENT_OPTIONS[QualityCategory.UNACCEPTABLE])
    # Zn has no specific process
    assert list(treatments[4:]) == [ELEMENT_TREATMENTS[Element.PB], ELEMENT_TREATMENTS[Element.HG]]


def test_mixed_sample_cadmium_treatment(mixed_sample):
    assessment = assess_water_quality(mixed_sample)

    assert assessment.category is QualityCategory.UNACCEPTABLE
    assert [m.element for m in assessment.exceeding_metals] == [Element.CD]
    assert assessment.treatment_options[-1] == ELEMENT_TREATMENTS[Element.CD]


def test_score_rounds_ties_up():
    # raw score 99.975
    assert assess_water_quality([MetalReading("Cu", 0.0005)]).score == 99.98


def test_custom_limits_table(lead_sample):
    assessment = assess_water_quality(lead_sample, limits={Element.PB: 0.05})

    assert assessment.category is QualityCategory.GOOD
    assert assessment.compliance.overall_compliance


# ==================== Batch ====================

def test_batch_assessment(lead_sample, copper_sample):
    items = batch_assess_water_quality([
        ("lead", lead_sample),
        {"id": "empty", "readings": []},
        ("copper", copper_sample),
    ])

    assert [i.id for i in items] == ["lead", "empty", "copper"]
    assert [i.assessment.category for i in items] == [
        QualityCategory.UNACCEPTABLE,
        QualityCategory.EXCELLENT,
        QualityCategory.EXCELLENT,
    ]


def test_batch_rejects_unknown_element():
    with pytest.raises(ValueError):
        batch_assess_water_quality([("bad", [{"element": "Fe", "concentration": 0.3}])])
