"""FastAPI REST API for cabinet pricing.

This module provides a REST API for quoting cabinets, validating pricing
configurations and generating price lists.

Usage:
    uvicorn cabinet_pricing.web:app --reload
"""

from cabinet_pricing.web.app import app, create_app

__all__ = ["app", "create_app"]
