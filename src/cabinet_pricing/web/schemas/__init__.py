"""Pydantic schemas for the REST API."""

from cabinet_pricing.web.schemas.requests import (
    ConfigValidateRequest,
    PriceListRequest,
    QuoteRequest,
)
from cabinet_pricing.web.schemas.responses import (
    BreakdownSchema,
    CabinetSpecSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    PriceListResponseSchema,
    PriceListRowSchema,
    QuoteResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "PriceListRequest",
    "QuoteRequest",
    # Responses
    "BreakdownSchema",
    "CabinetSpecSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "PriceListResponseSchema",
    "PriceListRowSchema",
    "QuoteResponseSchema",
    "ValidationResultSchema",
]
