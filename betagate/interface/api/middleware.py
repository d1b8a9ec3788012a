"""Registration gate middleware."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from betagate.config import BetaSettings
from betagate.domain.error import ForbiddenError
from betagate.domain.service import RegistrationGate
from betagate.interface.error import beta_access_error_response


class RegistrationGateMiddleware(BaseHTTPMiddleware):
    """Rejects account-creation requests without the gating secret.

    Runs before routing, so the handler behind the signup path never sees a
    request the gate turned away. The gate is resolved from the app
    container on each request.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        container = request.app.state.dishka_container
        gate = await container.get(RegistrationGate)

        if not gate.guards(request.url.path):
            return await call_next(request)

        beta_settings = await container.get(BetaSettings)
        try:
            gate.authorize(request.headers.get(beta_settings.header_name))
        except ForbiddenError as e:
            return beta_access_error_response(e)

        return await call_next(request)
