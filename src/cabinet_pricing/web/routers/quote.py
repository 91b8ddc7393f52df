"""Quote endpoints."""

from fastapi import APIRouter

from cabinet_pricing.application.config import load_config_from_dict
from cabinet_pricing.web.dependencies import QuoteCommandDep
from cabinet_pricing.web.schemas.requests import QuoteRequest
from cabinet_pricing.web.schemas.responses import QuoteResponseSchema

router = APIRouter(prefix="/quote", tags=["quote"])


@router.post("", response_model=QuoteResponseSchema)
async def create_quote(
    request: QuoteRequest,
    command: QuoteCommandDep,
) -> QuoteResponseSchema:
    """Price one cabinet configuration.

    Args:
        request: Request containing the pricing configuration.
        command: Injected QuoteCommand.

    Returns:
        Unrounded breakdown with the inputs that produced it.

    Raises:
        ConfigError: If the configuration fails schema validation
            (handled by exception handler).
        InvalidInput: If a pricing input is negative or non-finite
            (handled by exception handler).
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config)
    return QuoteResponseSchema.model_validate(output.to_dict())
