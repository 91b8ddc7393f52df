"""API routers for the REST API."""

from cabinet_pricing.web.routers.price_list import router as price_list_router
from cabinet_pricing.web.routers.quote import router as quote_router
from cabinet_pricing.web.routers.validate import router as validate_router

__all__ = [
    "price_list_router",
    "quote_router",
    "validate_router",
]
