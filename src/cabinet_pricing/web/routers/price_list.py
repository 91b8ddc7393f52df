"""Price list endpoints."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from cabinet_pricing.application.config import load_config_from_dict
from cabinet_pricing.infrastructure import ExporterRegistry
from cabinet_pricing.web.dependencies import PriceListCommandDep
from cabinet_pricing.web.exceptions import UnsupportedFormatError
from cabinet_pricing.web.schemas.requests import PriceListRequest
from cabinet_pricing.web.schemas.responses import (
    ExportFormatsSchema,
    PriceListResponseSchema,
)

router = APIRouter(prefix="/price-list", tags=["price-list"])

MEDIA_TYPES: dict[str, str] = {
    "csv": "text/csv",
    "text": "text/plain",
}


def _build_price_list(request: PriceListRequest, command: PriceListCommandDep):
    config = load_config_from_dict(request.config)
    if request.policy is None and config.price_list is None:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "A width policy is required: set policy or price_list.policy",
                "error_type": "missing_policy",
            },
        )
    return command.execute(config, request.policy)


@router.post("", response_model=PriceListResponseSchema)
async def create_price_list(
    request: PriceListRequest,
    command: PriceListCommandDep,
) -> PriceListResponseSchema:
    """Price every width bracket against every door option.

    Args:
        request: Configuration plus an optional width policy.
        command: Injected PriceListCommand.

    Returns:
        Price table with unrounded totals.
    """
    output = _build_price_list(request, command)
    return PriceListResponseSchema.model_validate(output.to_dict())


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_price_list_formats() -> ExportFormatsSchema:
    """List the formats a price list can be exported as."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_price_list(
    format_name: str,
    request: PriceListRequest,
    command: PriceListCommandDep,
) -> Response:
    """Export the price list in a registered format (text, csv or json)."""
    try:
        exporter_class = ExporterRegistry.get(format_name)
    except KeyError:
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = _build_price_list(request, command)
    exporter = exporter_class()
    return Response(
        content=exporter.export_string(output),
        media_type=MEDIA_TYPES.get(format_name, "application/json"),
        headers={
            "Content-Disposition": (
                f"attachment; filename=price-list.{exporter.file_extension}"
            )
        },
    )
