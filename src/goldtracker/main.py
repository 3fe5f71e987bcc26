"""Entry point for the gold tracker.

Wires all components together and serves the dashboard with uvicorn.
The FastAPI lifespan performs the initial price fetch on startup (the page
opens with the current month already charted) and tears the chart down on
shutdown.

Component wiring order (in build_components):
1. ChartSurface (the page canvas)
2. SeriesChartController (owner of the live chart)
3. NbpGoldPriceClient (price source)
4. TrackerSession (per-page state composing the above)
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI

from goldtracker.chart import ChartSurface, SeriesChartController, line_chart_factory
from goldtracker.config import AppSettings
from goldtracker.data.nbp_client import NbpGoldPriceClient
from goldtracker.logging import get_logger, setup_logging
from goldtracker.session import TrackerSession


def build_components(settings: AppSettings) -> dict[str, Any]:
    """Build all tracker components from settings.

    Args:
        settings: Application-wide settings.

    Returns:
        Dict mapping component names to instances.
    """
    surface = ChartSurface(settings.tracker.chart_surface_id)
    controller = SeriesChartController(line_chart_factory(surface))
    client = NbpGoldPriceClient(settings.nbp)
    session = TrackerSession(client, controller, settings.tracker)

    return {
        "surface": surface,
        "controller": controller,
        "client": client,
        "session": session,
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage the tracker session within the FastAPI application.

    On startup: stores components on app.state and charts the default range.
    On shutdown: destroys the live chart.
    """
    logger = get_logger("goldtracker.main")
    components = app.state.components

    app.state.surface = components["surface"]
    app.state.session = components["session"]

    await components["session"].update_graph()
    logger.info("lifespan_started", points=len(components["session"].series))

    yield

    components["session"].shutdown()
    logger.info("gold_tracker_stopped")


async def run() -> None:
    """Run the gold tracker dashboard."""
    settings = AppSettings()

    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger("goldtracker.main")

    components = build_components(settings)

    from goldtracker.dashboard.app import create_dashboard_app

    app = create_dashboard_app(lifespan=lifespan)
    app.state.settings = settings
    app.state.components = components

    logger.info(
        "starting_dashboard",
        host=settings.dashboard.host,
        port=settings.dashboard.port,
    )

    config = uvicorn.Config(
        app,
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        log_level="warning",  # Suppress uvicorn access logs
    )
    server = uvicorn.Server(config)
    await server.serve()


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
