"""Unit conversion endpoint for display labels."""

from __future__ import annotations

from fastapi import APIRouter, Query

from saillog.contracts.enums import Quantity
from saillog.services.units import convert

router = APIRouter(prefix="/units", tags=["units"])


@router.get("/convert")
async def convert_value(
    quantity: Quantity,
    value: float = Query(..., description="Value in the base unit (m, m/s, deg C, hPa)"),
    unit: str = Query(..., description="Target unit, e.g. nm, knots, fahrenheit, inHg"),
) -> dict:
    numeric, display = convert(quantity, value, unit)
    return {
        "quantity": Quantity(quantity).value,
        "unit": unit,
        "value": numeric,
        "display": display,
    }
