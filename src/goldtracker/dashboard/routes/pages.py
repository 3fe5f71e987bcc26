"""Page routes serving the main tracker HTML template."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

router = APIRouter()


def panel_context(request: Request, investment_value: str | None = None) -> dict:
    """Template context shared by the full page and the panel partial.

    investment_value echoes what the user typed so a re-render keeps it;
    without it the input shows the last accepted principal.
    """
    session = request.app.state.session
    tracker = session.snapshot()
    surface = request.app.state.surface
    return {
        "request": request,
        "tracker": tracker,
        "investment_value": (
            tracker["principal"] if investment_value is None else investment_value
        ),
        "surface_id": surface.surface_id,
        "chart_config": surface.config,
    }


@router.get("/", response_class=HTMLResponse)
async def tracker_index(request: Request) -> HTMLResponse:
    """Main tracker page: inputs, result box and the price chart canvas."""
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(request, "index.html", panel_context(request))
