"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from betagate.config import Settings
from betagate.interface.api.middleware import RegistrationGateMiddleware
from betagate.interface.api.routes import beta, health
from betagate.interface.error import register_error_handlers
from betagate.util.di.container import create_container, setup_di
from betagate.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Application settings, loaded from environment if omitted
        container: DI container, built from settings if omitted
    """
    settings = settings or Settings()

    # Instrument httpx for outbound HTTP requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Betagate API",
        description="Invite-code gate in front of account registration",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Gate runs before routing so rejected sign-ups never reach a handler
    app_instance.add_middleware(RegistrationGateMiddleware)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, *settings.beta.trusted_origins],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            settings.beta.header_name,
            beta.ADMIN_HEADER,
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    container = container or create_container(settings)
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(beta.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
