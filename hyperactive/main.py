"""
Application entry point.

Creates the FastAPI application and wires together:
- The CORS policy (built once from settings, read-only afterwards)
- Error handlers (centralized error-to-HTTP mapping)
- Logging configuration
- The example request router, mounted for every method and path

No business logic belongs here.
"""

from fastapi import FastAPI

from hyperactive.core.config import Settings, settings
from hyperactive.interfaces.router import request_router
from hyperactive.shared.errors.handlers import register_error_handlers
from hyperactive.shared.logging import configure_logging

ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        app_settings: Settings to use. Defaults to the environment settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        openapi_url="/openapi.json" if app_settings.debug else None,
    )

    # --- Shared read-only state ---
    app.state.cors_policy = app_settings.get_cors_policy()

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routes ---
    app.add_api_route(
        "/{path:path}",
        request_router,
        methods=ROUTED_METHODS,
        include_in_schema=False,
    )

    return app


app = create_app()
