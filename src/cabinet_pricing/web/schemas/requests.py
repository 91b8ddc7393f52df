"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from cabinet_pricing.domain import WidthPolicy


class QuoteRequest(BaseModel):
    """Request for pricing a cabinet from a configuration document."""

    config: dict[str, Any] = Field(..., description="Pricing configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Pricing configuration JSON")


class PriceListRequest(BaseModel):
    """Request for a bracketed price list."""

    config: dict[str, Any] = Field(..., description="Pricing configuration JSON")
    policy: WidthPolicy | None = Field(
        default=None,
        description="Width priced inside each bracket. Overrides price_list.policy",
    )
