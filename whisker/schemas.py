"""Pydantic schemas for the Whisker API.

Request/response models for:
- Unit catalog and conversion
- Measurement extraction and quantity literals
- Scaling (stateless and session based)
"""

from typing import Optional

from pydantic import BaseModel, Field

from .measurement.catalog import MeasurementType, UnitSystem
from .measurement.scanner import PatternClass


# --- Units ---

class UnitOut(BaseModel):
    name: str
    plural: str
    abbreviations: list[str]
    measurement_type: MeasurementType
    system: UnitSystem
    conversion_factor: float
    metric_equivalent: str
    imperial_equivalent: str
    symbol: str

    class Config:
        from_attributes = True


class UnitConvertRequest(BaseModel):
    qty: float = Field(..., ge=0)
    unit: str = Field(..., min_length=1)
    target_system: UnitSystem


class UnitConvertResponse(BaseModel):
    qty: float
    unit: str
    display: str


class TextConvertRequest(BaseModel):
    texts: list[str]
    target_system: Optional[UnitSystem] = None  # falls back to settings.default_unit_system


class TextsResponse(BaseModel):
    texts: list[str]


# --- Measurements ---

class ExtractRequest(BaseModel):
    text: str


class MeasurementOut(BaseModel):
    value: float
    unit_text: str
    unit: Optional[str] = None  # canonical unit name, if recognised
    start: int
    end: int
    quantity_start: int
    quantity_end: int
    pattern_class: PatternClass


class ExtractResponse(BaseModel):
    measurements: list[MeasurementOut] = []


class QuantityParseRequest(BaseModel):
    text: str


class QuantityParseResponse(BaseModel):
    value: float


class QuantityFormatRequest(BaseModel):
    value: float = Field(..., ge=0)


class QuantityFormatResponse(BaseModel):
    text: str


# --- Scaling ---

class ScaleRequest(BaseModel):
    ingredients: list[str]
    factor: float = Field(..., gt=0)


class IngredientsResponse(BaseModel):
    ingredients: list[str]


class FactorRequest(BaseModel):
    ingredient: str
    target_value: float = Field(..., gt=0)


class FactorResponse(BaseModel):
    factor: float


class RenderRequest(BaseModel):
    ingredients: list[str]
    factor: float = Field(1.0, gt=0)
    target_system: Optional[UnitSystem] = None


class PresetsResponse(BaseModel):
    presets: list[float]


class SessionCreate(BaseModel):
    ingredients: list[str]


class SessionIngredientsUpdate(BaseModel):
    ingredients: list[str]


class SessionFactorUpdate(BaseModel):
    factor: float = Field(..., gt=0)


class SessionCustomScaling(BaseModel):
    index: int = Field(..., ge=0)
    target_value: float = Field(..., gt=0)


class ScalingSessionOut(BaseModel):
    id: str
    original_quantities: list[str]
    scaled_quantities: list[str]
    current_factor: float
    is_custom_scaling: bool
    custom_target_index: Optional[int] = None
    custom_target_value: Optional[float] = None
