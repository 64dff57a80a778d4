"""
HMPI API Schemas

Pydantic models for request/response validation.
"""
from typing import Dict, List
from datetime import datetime

from pydantic import BaseModel, Field

from ...utils.constants import Element, RiskLevel, QualityCategory


# ==================== Input Models ====================

class MetalReadingIn(BaseModel):
    element: Element
    concentration: float = Field(..., ge=0, description="Measured concentration")
    unit: str = Field("mg/L", description="mg/L, µg/L, ppm or ppb; other values are read as mg/L")


class SampleIn(BaseModel):
    id: str
    readings: List[MetalReadingIn]


class ReadingsRequest(BaseModel):
    readings: List[MetalReadingIn]


class BatchRequest(BaseModel):
    samples: List[SampleIn]


# ==================== HMPI Models ====================

class SubIndexResponse(BaseModel):
    element: Element
    concentration: float = Field(..., description="Concentration in mg/L")
    standard_limit: float
    sub_index: float
    contribution_percent: float


class HMPIResponse(BaseModel):
    overall_hmpi: float
    risk_level: RiskLevel
    sub_indices: List[SubIndexResponse]
    recommendations: List[str]


class HMPIBatchItem(BaseModel):
    id: str
    result: HMPIResponse


class HMPIBatchSummary(BaseModel):
    total_samples: int
    risk_distribution: Dict[str, int]
    mean_hmpi: float
    max_hmpi: float
    unsafe_count: int


class HMPIBatchResponse(BaseModel):
    results: List[HMPIBatchItem]
    summary: HMPIBatchSummary


# ==================== Quality Models ====================

class ComplianceResponse(BaseModel):
    who: bool
    epa: bool
    national: bool
    overall_compliance: bool


class ExceedingMetalResponse(BaseModel):
    element: Element
    concentration: float = Field(..., description="Concentration in mg/L")
    limit: float
    exceedance_ratio: float


class QualityResponse(BaseModel):
    category: QualityCategory
    score: float = Field(..., ge=0, le=100)
    compliance: ComplianceResponse
    exceeding_metals: List[ExceedingMetalResponse]
    recommendations: List[str]
    usage_restrictions: List[str]
    treatment_options: List[str]


class QualityBatchItem(BaseModel):
    id: str
    assessment: QualityResponse


class QualityBatchSummary(BaseModel):
    total_samples: int
    category_distribution: Dict[str, int]
    mean_score: float
    min_score: float
    compliant_count: int


class QualityBatchResponse(BaseModel):
    assessments: List[QualityBatchItem]
    summary: QualityBatchSummary


# ==================== Reference Models ====================

class StandardLimitResponse(BaseModel):
    element: Element
    limit_mg_l: float
    weight: float


class UnitResponse(BaseModel):
    unit: str
    divisor_to_mg_l: float
    aliases: List[str] = []


# ==================== Health Check ====================

class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: datetime
