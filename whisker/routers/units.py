"""
Router for unit conversion utilities.
"""

from fastapi import APIRouter, Depends, HTTPException

from ..measurement.catalog import UNIT_DEFINITIONS
from ..measurement.quantity import QuantityParseError, format_quantity, parse_quantity
from ..measurement.scanner import extract_measurements
from ..schemas import (
    ExtractRequest,
    ExtractResponse,
    MeasurementOut,
    QuantityFormatRequest,
    QuantityFormatResponse,
    QuantityParseRequest,
    QuantityParseResponse,
    TextConvertRequest,
    TextsResponse,
    UnitConvertRequest,
    UnitConvertResponse,
    UnitOut,
)
from ..services.unit_conversion import UnitConverter
from ..deps import get_converter
from ..settings import settings

router = APIRouter()


@router.get("/catalog", response_model=list[UnitOut])
def list_units():
    """All units the scanner and converter understand."""
    return [UnitOut.model_validate(u) for u in UNIT_DEFINITIONS]


@router.post("/convert", response_model=UnitConvertResponse)
def convert_units(
    req: UnitConvertRequest,
    converter: UnitConverter = Depends(get_converter),
):
    """
    Convert a single quantity into the best-fit unit of the target system.
    """
    result = converter.convert_quantity(req.qty, req.unit, req.target_system)
    if result is None:
        raise HTTPException(status_code=400, detail=f"Unknown unit '{req.unit}'")

    return UnitConvertResponse(**result.to_dict())


@router.post("/convert-text", response_model=TextsResponse)
def convert_text(
    req: TextConvertRequest,
    converter: UnitConverter = Depends(get_converter),
):
    """Rewrite ingredient lines into the target system (or the configured default)."""
    system = req.target_system or settings.default_unit_system
    return TextsResponse(texts=converter.convert_many(req.texts, system))


@router.post("/extract", response_model=ExtractResponse)
def extract(req: ExtractRequest):
    measurements = extract_measurements(req.text) or []
    return ExtractResponse(measurements=[
        MeasurementOut(
            value=m.value,
            unit_text=m.unit_text,
            unit=m.unit.name if m.unit else None,
            start=m.start,
            end=m.end,
            quantity_start=m.quantity_start,
            quantity_end=m.quantity_end,
            pattern_class=m.pattern_class,
        )
        for m in measurements
    ])


@router.post("/parse", response_model=QuantityParseResponse)
def parse(req: QuantityParseRequest):
    try:
        value = parse_quantity(req.text)
    except QuantityParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return QuantityParseResponse(value=value)


@router.post("/format", response_model=QuantityFormatResponse)
def format_value(req: QuantityFormatRequest):
    return QuantityFormatResponse(text=format_quantity(req.value))
