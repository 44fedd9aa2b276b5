"""FastAPI application factory."""

from fastapi import FastAPI

from fitness_reports.api.reports import router as reports_router
from fitness_reports.app_logging import configure_logging
from fitness_reports.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    app = FastAPI()
    app.state.container = container

    app.include_router(reports_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
