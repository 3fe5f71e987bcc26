"""POST endpoints driven by the tracker form; each returns the panel partial."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.datastructures import FormData

from goldtracker.dashboard.routes.pages import panel_context
from goldtracker.logging import get_logger
from goldtracker.validation import parse_date

logger = get_logger(__name__)

router = APIRouter()

PANEL = "partials/tracker_panel.html"


async def _apply_dates(request: Request) -> FormData:
    """Copy the date fields of the submitted form into the session."""
    form = await request.form()
    session = request.app.state.session
    session.set_date_range(
        parse_date(form.get("start_date")),
        parse_date(form.get("end_date")),
    )
    return form


def _typed_principal(form: FormData) -> str | None:
    value = form.get("investment_value")
    return value if isinstance(value, str) else None


def _render_panel(request: Request, investment_value: str | None = None) -> HTMLResponse:
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(
        request, PANEL, panel_context(request, investment_value)
    )


@router.post("/dates", response_class=HTMLResponse)
async def change_dates(request: Request) -> HTMLResponse:
    """Re-validate the range after a date input changed."""
    form = await _apply_dates(request)
    return _render_panel(request, _typed_principal(form))


@router.post("/update-graph", response_class=HTMLResponse)
async def update_graph(request: Request) -> HTMLResponse:
    """Fetch prices for the submitted range and redraw the chart."""
    form = await _apply_dates(request)
    updated = await request.app.state.session.update_graph()
    logger.info("graph_update_requested", updated=updated)
    return _render_panel(request, _typed_principal(form))


@router.post("/calculate", response_class=HTMLResponse)
async def calculate_returns(request: Request) -> HTMLResponse:
    """Refresh the chart and compute the best buy/sell window."""
    form = await _apply_dates(request)
    typed = _typed_principal(form)
    await request.app.state.session.calculate_returns(typed)
    return _render_panel(request, typed)


@router.post("/reset", response_class=HTMLResponse)
async def reset(request: Request) -> HTMLResponse:
    """Restore the initial inputs and clear the chart."""
    request.app.state.session.reset()
    return _render_panel(request)
