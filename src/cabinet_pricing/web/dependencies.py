"""FastAPI dependency injection for pricing commands."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cabinet_pricing.application import PriceListCommand, QuoteCommand
from cabinet_pricing.domain import PriceEngine


@lru_cache(maxsize=1)
def get_price_engine() -> PriceEngine:
    """Get the shared PriceEngine. It holds no state."""
    return PriceEngine()


def get_quote_command(
    engine: Annotated[PriceEngine, Depends(get_price_engine)],
) -> QuoteCommand:
    """Dependency for QuoteCommand."""
    return QuoteCommand(engine)


def get_price_list_command(
    engine: Annotated[PriceEngine, Depends(get_price_engine)],
) -> PriceListCommand:
    """Dependency for PriceListCommand."""
    return PriceListCommand(engine)


# Type aliases for cleaner endpoint signatures
QuoteCommandDep = Annotated[QuoteCommand, Depends(get_quote_command)]
PriceListCommandDep = Annotated[PriceListCommand, Depends(get_price_list_command)]
