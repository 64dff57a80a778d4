"""
Reference Standards API Routes
"""
from typing import List

from fastapi import APIRouter

from ...models.schemas import StandardLimitResponse, UnitResponse
from ....utils.constants import (
    Element,
    STANDARD_LIMITS,
    METAL_WEIGHTS,
    DEFAULT_METAL_WEIGHT,
    UNIT_DIVISORS,
    UNIT_ALIASES,
)

router = APIRouter()


@router.get("/limits", response_model=List[StandardLimitResponse])
async def list_limits():
    """
    Standard limits (mg/L) and toxicity weights for each heavy metal.
    """
    return [
        StandardLimitResponse(
            element=element,
            limit_mg_l=STANDARD_LIMITS[element],
            weight=METAL_WEIGHTS.get(element, DEFAULT_METAL_WEIGHT)
        )
        for element in Element
    ]


@router.get("/units", response_model=List[UnitResponse])
async def list_units():
    """
    Supported concentration units and their conversion to mg/L.
    """
    return [
        UnitResponse(
            unit=unit.value,
            divisor_to_mg_l=divisor,
            aliases=[alias for alias, target in UNIT_ALIASES.items() if target == unit]
        )
        for unit, divisor in UNIT_DIVISORS.items()
    ]
