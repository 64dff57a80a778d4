"""
Water Quality API Routes
"""
import logging

from fastapi import APIRouter, HTTPException

from ...models.schemas import (
    ReadingsRequest,
    BatchRequest,
    QualityResponse,
    QualityBatchItem,
    QualityBatchResponse,
    QualityBatchSummary,
    ComplianceResponse,
    ExceedingMetalResponse,
)
from ...config import settings
from ....models.readings import Sample
from ....models.quality_classifier import (
    QualityAssessment,
    assess_water_quality,
    batch_assess_water_quality,
)
from ....models.summary import summarize_quality_batch
from .hmpi import to_readings

logger = logging.getLogger(__name__)
router = APIRouter()


def to_quality_response(assessment: QualityAssessment) -> QualityResponse:
    compliance = assessment.compliance
    return QualityResponse(
        category=assessment.category,
        score=assessment.score,
        compliance=ComplianceResponse(
            who=compliance.who,
            epa=compliance.epa,
            national=compliance.national,
            overall_compliance=compliance.overall_compliance
        ),
        exceeding_metals=[
            ExceedingMetalResponse(
                element=m.element,
                concentration=m.concentration_mg_l,
                limit=m.limit,
                exceedance_ratio=m.exceedance_ratio
            )
            for m in assessment.exceeding_metals
        ],
        recommendations=list(assessment.recommendations),
        usage_restrictions=list(assessment.usage_restrictions),
        treatment_options=list(assessment.treatment_options)
    )


@router.post("/assess", response_model=QualityResponse)
async def assess(request: ReadingsRequest):
    """
    Categorise water quality for one sample.

    A sample without positive readings is reported as Excellent.
    """
    assessment = assess_water_quality(to_readings(request.readings))
    logger.info(f"Quality assessed: {assessment.category.value} ({assessment.score})")
    return to_quality_response(assessment)


@router.post("/batch", response_model=QualityBatchResponse)
async def assess_batch(request: BatchRequest):
    """
    Categorise water quality for multiple samples.
    """
    if len(request.samples) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"Batch exceeds {settings.MAX_BATCH_SIZE} samples"
        )

    samples = [
        Sample(id=s.id, readings=tuple(to_readings(s.readings)))
        for s in request.samples
    ]
    items = batch_assess_water_quality(samples)

    logger.info(f"Quality batch assessed for {len(items)} samples")

    return QualityBatchResponse(
        assessments=[
            QualityBatchItem(id=i.id, assessment=to_quality_response(i.assessment))
            for i in items
        ],
        summary=QualityBatchSummary(**summarize_quality_batch(items))
    )
