"""JSON API endpoints for tracker state, the current series, and returns."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from goldtracker.analytics.optimizer import find_best_investment
from goldtracker.exceptions import InvalidPrincipalError
from goldtracker.logging import get_logger
from goldtracker.validation import parse_date, parse_principal

logger = get_logger(__name__)

router = APIRouter()


@router.get("/state")
async def get_state(request: Request) -> JSONResponse:
    """Current inputs, validation state, chart state and last result."""
    return JSONResponse(content=request.app.state.session.snapshot())


@router.get("/prices")
async def get_prices(request: Request) -> JSONResponse:
    """Price series currently on display."""
    session = request.app.state.session
    return JSONResponse(content=[p.to_dict() for p in session.series])


@router.get("/chart")
async def get_chart(request: Request) -> JSONResponse:
    """Chart.js config of the live chart, or null when nothing is drawn."""
    surface = request.app.state.surface
    return JSONResponse(content={
        "surface_id": surface.surface_id,
        "config": surface.config,
    })


@router.get("/date-range")
async def get_date_range(
    request: Request, start: str | None = None, end: str | None = None
) -> JSONResponse:
    """Validate a candidate range without changing the session."""
    session = request.app.state.session
    state = session.check_range(parse_date(start), parse_date(end))
    return JSONResponse(content=state.to_dict())


@router.get("/returns")
async def get_returns(request: Request, principal: str | None = None) -> JSONResponse:
    """Best buy/sell window for the principal over the displayed series."""
    session = request.app.state.session
    try:
        amount = parse_principal(principal)
    except InvalidPrincipalError as e:
        logger.info("returns_rejected", error=str(e))
        return JSONResponse(status_code=422, content={"error": str(e)})

    result = find_best_investment(session.series, amount)
    return JSONResponse(content={
        "principal": str(amount),
        "points": len(session.series),
        "result": result.to_dict() if result else None,
    })
