"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class CabinetSpecSchema(BaseModel):
    """Cabinet that was priced."""

    width_mm: float = Field(..., description="Width in millimetres")
    height_mm: float = Field(..., description="Height in millimetres")
    depth_mm: float = Field(..., description="Depth in millimetres")
    back_panel_qty: int
    bottom_panel_qty: int
    side_panel_qty: int
    door_qty: int


class BreakdownSchema(BaseModel):
    """Itemized price breakdown. Values are unrounded."""

    back_cost: float
    bottom_cost: float
    side_cost: float
    door_cost: float
    hardware_cost: float
    total_door_rate: float = Field(..., description="Door rate per m2 actually used")
    subtotal: float
    subtotal_with_wastage: float
    total: float
    carcass_cost: float
    wastage_amount: float
    tax_amount: float


class QuoteResponseSchema(BaseModel):
    """Response for a quote."""

    spec: CabinetSpecSchema
    rates: dict[str, float] = Field(..., description="Rate settings snapshot used")
    door_rates: dict[str, float] = Field(..., description="Door rate addends used")
    breakdown: BreakdownSchema
    quantity: int = Field(..., description="Number of identical cabinets")
    line_total: float = Field(..., description="total x quantity")


class PriceListRowSchema(BaseModel):
    """One bracket of a price list."""

    label: str = Field(..., description="Bracket label, e.g. 450-499mm")
    width_mm: float = Field(..., description="Width that was priced")
    prices: list[float] = Field(..., description="Total per door option column")


class PriceListResponseSchema(BaseModel):
    """Response for a price list."""

    cabinet_name: str
    policy: str = Field(..., description="Width policy used")
    columns: list[str] = Field(..., description="Door option labels")
    rows: list[PriceListRowSchema] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available price list formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
