"""
HMPI - Constants and Configuration

Regulatory limits, toxicity weights, thresholds and advisory copy used
across the calculation engines.
"""
from enum import Enum
from types import MappingProxyType


class Element(str, Enum):
    PB = "Pb"  # Lead
    CD = "Cd"  # Cadmium
    CR = "Cr"  # Chromium
    AS = "As"  # Arsenic
    HG = "Hg"  # Mercury
    CU = "Cu"  # Copper
    ZN = "Zn"  # Zinc
    NI = "Ni"  # Nickel


class Unit(str, Enum):
    MG_PER_L = "mg/L"
    UG_PER_L = "µg/L"
    PPM = "ppm"
    PPB = "ppb"


class RiskLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"


class QualityCategory(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    UNACCEPTABLE = "Unacceptable"


# WHO/EPA drinking water limits (mg/L)
STANDARD_LIMITS = MappingProxyType({
    Element.PB: 0.01,
    Element.CD: 0.003,
    Element.CR: 0.05,
    Element.AS: 0.01,
    Element.HG: 0.006,
    Element.CU: 2.0,
    Element.ZN: 3.0,
    Element.NI: 0.07,
})

# Relative toxicity weights (not normalised)
METAL_WEIGHTS = MappingProxyType({
    Element.PB: 0.25,
    Element.CD: 0.25,
    Element.CR: 0.15,
    Element.AS: 0.2,
    Element.HG: 0.25,
    Element.CU: 0.05,
    Element.ZN: 0.05,
    Element.NI: 0.1,
})

DEFAULT_METAL_WEIGHT = 0.1

# Divisors to mg/L
UNIT_DIVISORS = MappingProxyType({
    Unit.MG_PER_L: 1,
    Unit.PPM: 1,
    Unit.UG_PER_L: 1000,
    Unit.PPB: 1000,
})

# Alternate spellings of µg/L seen in form input
UNIT_ALIASES = MappingProxyType({
    "ug/L": Unit.UG_PER_L,
    "μg/L": Unit.UG_PER_L,  # Greek mu
    "Î¼g/L": Unit.UG_PER_L,  # mis-encoded Greek mu
})

# Upper bound (inclusive) of HMPI for each risk level
RISK_THRESHOLDS = (
    (100, RiskLevel.LOW),
    (200, RiskLevel.MODERATE),
    (300, RiskLevel.HIGH),
)

# Upper bound (inclusive) of worst concentration/limit ratio per category
QUALITY_THRESHOLDS = (
    (0.25, QualityCategory.EXCELLENT),
    (0.5, QualityCategory.GOOD),
    (0.75, QualityCategory.FAIR),
    (1.0, QualityCategory.POOR),
)

# Sub-index above which a metal gets its own recommendation
SUB_INDEX_EXCEEDS = 100
SUB_INDEX_CRITICAL = 200

# ==================== Advisory copy ====================

HMPI_RECOMMENDATIONS = MappingProxyType({
    RiskLevel.LOW: (
        "Water quality is within acceptable limits for heavy metals.",
        "Continue regular monitoring to maintain safety standards.",
    ),
    RiskLevel.MODERATE: (
        "Increased monitoring frequency is recommended.",
        "Consider implementing basic treatment measures.",
        "Investigate potential contamination sources.",
    ),
    RiskLevel.HIGH: (
        "Immediate action required - water treatment necessary.",
        "Restrict water usage until treatment is implemented.",
        "Conduct comprehensive source investigation.",
        "Implement advanced treatment technologies.",
    ),
    RiskLevel.VERY_HIGH: (
        "CRITICAL: Water is unsafe for consumption.",
        "Immediate cessation of water usage required.",
        "Emergency treatment measures must be implemented.",
        "Comprehensive environmental assessment needed.",
    ),
})

QUALITY_RECOMMENDATIONS = MappingProxyType({
    QualityCategory.EXCELLENT: (
        "Water quality is excellent and safe for all uses.",
        "Continue regular monitoring to maintain high standards.",
        "Consider this site as a reference for best practices.",
    ),
    QualityCategory.GOOD: (
        "Water quality is good and suitable for most uses.",
        "Maintain current monitoring frequency.",
        "Monitor trends to prevent quality degradation.",
    ),
    QualityCategory.FAIR: (
        "Water quality is acceptable but requires attention.",
        "Increase monitoring frequency to track changes.",
        "Consider preventive measures to improve quality.",
        "Investigate potential contamination sources.",
    ),
    QualityCategory.POOR: (
        "Water quality is poor and requires immediate action.",
        "Implement treatment measures before use.",
        "Conduct comprehensive source investigation.",
        "Consider alternative water sources if available.",
    ),
    QualityCategory.UNACCEPTABLE: (
        "CRITICAL: Water is unsafe and must not be used.",
        "Immediate cessation of water usage required.",
        "Emergency treatment or alternative sources needed.",
        "Comprehensive environmental remediation required.",
    ),
})

_NO_RESTRICTIONS = ("No restrictions - suitable for all uses including drinking water.",)

USAGE_RESTRICTIONS = MappingProxyType({
    QualityCategory.EXCELLENT: _NO_RESTRICTIONS,
    QualityCategory.GOOD: _NO_RESTRICTIONS,
    QualityCategory.FAIR: (
        "Suitable for drinking with basic treatment (boiling, filtration).",
        "Safe for irrigation and industrial uses.",
        "Monitor regularly if used for sensitive applications.",
    ),
    QualityCategory.POOR: (
        "NOT suitable for drinking without advanced treatment.",
        "Limited use for irrigation (monitor soil accumulation).",
        "Industrial use only with appropriate precautions.",
        "Avoid contact with food preparation.",
    ),
    QualityCategory.UNACCEPTABLE: (
        "PROHIBITED for drinking water use.",
        "PROHIBITED for food preparation or cooking.",
        "PROHIBITED for irrigation of food crops.",
        "Limited industrial use only with strict safety measures.",
        "Avoid all human contact where possible.",
    ),
})

_NO_TREATMENT = ("No treatment required - water meets quality standards.",)
_ADVANCED_TREATMENT = (
    "Advanced treatment required before any use.",
    "Reverse osmosis for comprehensive contaminant removal.",
    "Ion exchange for specific metal removal.",
    "Chemical precipitation and coagulation.",
)

TREATMENT_OPTIONS = MappingProxyType({
    QualityCategory.EXCELLENT: _NO_TREATMENT,
    QualityCategory.GOOD: _NO_TREATMENT,
    QualityCategory.FAIR: (
        "Basic filtration and disinfection recommended.",
        "Activated carbon filtration for organic contaminants.",
        "Regular monitoring during treatment.",
    ),
    QualityCategory.POOR: _ADVANCED_TREATMENT,
    QualityCategory.UNACCEPTABLE: _ADVANCED_TREATMENT,
})

# Cu, Zn and Ni have no dedicated removal process listed
ELEMENT_TREATMENTS = MappingProxyType({
    Element.PB: "Lead-specific: Corrosion control, phosphate treatment, pipe replacement.",
    Element.AS: "Arsenic-specific: Oxidation followed by coagulation/filtration.",
    Element.HG: "Mercury-specific: Activated carbon adsorption, ion exchange.",
    Element.CD: "Cadmium-specific: Ion exchange, reverse osmosis, lime softening.",
    Element.CR: "Chromium-specific: Reduction followed by precipitation.",
})
