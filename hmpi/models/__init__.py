# HMPI - Models Package

# Inputs
from .readings import MetalReading, Sample, EmptyInputError, parse_readings, filter_valid_readings

# Engines
from .hmpi_calculator import HMPIResult, SubIndex, calculate_hmpi, calculate_batch_hmpi
from .quality_classifier import (
    QualityAssessment, StandardsCompliance, ExceedingMetal,
    assess_water_quality, batch_assess_water_quality,
)

# Batch summaries
from .summary import summarize_hmpi_batch, summarize_quality_batch
