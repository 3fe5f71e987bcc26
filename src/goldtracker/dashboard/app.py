"""FastAPI dashboard application factory with Jinja2 templates."""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from goldtracker.dashboard.routes import actions, api, pages

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _format_money(value: Any) -> str:
    """Format a Decimal (or its string form) with two decimal places."""
    if value is None or value == "":
        return "0.00"
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return str(value)
    return str(amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _format_date(value: Any) -> str:
    """Render a date (or ISO string) as YYYY-MM-DD."""
    if value is None or value == "":
        return "N/A"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def create_dashboard_app(lifespan: Any = None) -> FastAPI:
    """Create and configure the FastAPI dashboard application.

    Args:
        lifespan: Optional async context manager for application lifespan events.
                  Used by main.py to inject startup/shutdown logic.

    Returns:
        Configured FastAPI application with templates and routes. Callers
        must set app.state.session and app.state.surface before serving.
    """
    app = FastAPI(
        title="Gold Price Tracker",
        lifespan=lifespan,
    )

    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.filters["format_money"] = _format_money
    templates.env.filters["format_date"] = _format_date
    app.state.templates = templates

    app.include_router(pages.router)
    app.include_router(api.router, prefix="/api")
    app.include_router(actions.router, prefix="/actions")

    return app
