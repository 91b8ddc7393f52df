"""Configuration validation endpoints."""

from fastapi import APIRouter

from cabinet_pricing.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from cabinet_pricing.web.schemas.requests import ConfigValidateRequest
from cabinet_pricing.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a pricing configuration without pricing it.

    Schema errors are returned as validation errors in the response body.

    Args:
        request: Request containing configuration to validate.

    Returns:
        Validation result with errors and warnings.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        errors = [
            {"message": detail["message"], "path": detail["path"]}
            for detail in e.details
        ]
        return ValidationResultSchema(
            is_valid=False,
            errors=errors or [{"message": e.message, "path": ""}],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": err.message, "path": err.path} for err in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
