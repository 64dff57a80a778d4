"""
HMPI Calculation API Routes
"""
import logging

from fastapi import APIRouter, HTTPException

from ...models.schemas import (
    ReadingsRequest,
    BatchRequest,
    HMPIResponse,
    HMPIBatchItem,
    HMPIBatchResponse,
    HMPIBatchSummary,
    SubIndexResponse,
)
from ...config import settings
from ....models.readings import EmptyInputError, MetalReading, Sample, filter_valid_readings
from ....models.hmpi_calculator import HMPIResult, calculate_hmpi, calculate_batch_hmpi
from ....models.summary import summarize_hmpi_batch

logger = logging.getLogger(__name__)
router = APIRouter()


def to_readings(rows) -> list:
    """Convert request readings, dropping blank (zero) rows"""
    readings = [MetalReading(r.element, r.concentration, r.unit) for r in rows]
    return filter_valid_readings(readings)


def to_hmpi_response(result: HMPIResult) -> HMPIResponse:
    return HMPIResponse(
        overall_hmpi=result.overall_hmpi,
        risk_level=result.risk_level,
        sub_indices=[
            SubIndexResponse(
                element=s.element,
                concentration=s.concentration_mg_l,
                standard_limit=s.standard_limit,
                sub_index=s.sub_index,
                contribution_percent=s.contribution_percent
            )
            for s in result.sub_indices
        ],
        recommendations=list(result.recommendations)
    )


@router.post("/calculate", response_model=HMPIResponse)
async def calculate(request: ReadingsRequest):
    """
    Calculate the Heavy Metal Pollution Index for one sample.

    Readings with zero concentration are ignored. At least one
    positive reading is required.
    """
    try:
        result = calculate_hmpi(to_readings(request.readings))
    except EmptyInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info(f"HMPI calculated: {result.overall_hmpi} ({result.risk_level.value})")
    return to_hmpi_response(result)


@router.post("/batch", response_model=HMPIBatchResponse)
async def calculate_batch(request: BatchRequest):
    """
    Calculate HMPI for multiple samples.

    A sample without any positive reading fails the whole batch.
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

    try:
        items = calculate_batch_hmpi(samples)
    except EmptyInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info(f"HMPI batch calculated for {len(items)} samples")

    return HMPIBatchResponse(
        results=[HMPIBatchItem(id=i.id, result=to_hmpi_response(i.result)) for i in items],
        summary=HMPIBatchSummary(**summarize_hmpi_batch(items))
    )
