#!/usr/bin/env python3
"""Start the beta gate API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from betagate.config import Settings
from betagate.util.logging import setup_logging
from betagate.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    if settings.beta.enabled and not settings.beta.secret:
        logfire.warn("BETA__SECRET is not set; every sign-up will be rejected")

    try:
        logfire.info(
            "Starting beta gate API",
            base_url=settings.api.base_url,
            registration_url=settings.beta.registration_url,
            gating_enabled=settings.beta.enabled,
        )

        uvicorn.run(
            "betagate.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
