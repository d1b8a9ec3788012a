"""Unit tests for the HTTP registration client."""

import json

import httpx
import pytest

from betagate.adapter.error import RegistrationError
from betagate.adapter.registration import HttpRegistrationClient
from betagate.domain.value import RegistrationPayload

PAYLOAD = RegistrationPayload(
    name="Alice", username="alice", email="a@x.com", password="correct-horse"
)


class TestHttpRegistrationClient:
    """Tests for HttpRegistrationClient."""

    @pytest.mark.asyncio
    async def test_posts_json_with_gating_header(self):
        """Body and headers reach the endpoint as expected."""
        # Arrange
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"user": {"id": "u1"}})

        client = HttpRegistrationClient(
            "http://auth.local/sign-up/email",
            transport=httpx.MockTransport(handler),
        )

        # Act
        result = await client.register(PAYLOAD, headers={"X-Beta-Signup": "s3cret"})

        # Assert
        assert result.status_code == 200
        assert result.body == {"user": {"id": "u1"}}

        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "http://auth.local/sign-up/email"
        assert request.headers["X-Beta-Signup"] == "s3cret"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {
            "name": "Alice",
            "username": "alice",
            "email": "a@x.com",
            "password": "correct-horse",
            "isEarlyAccess": True,
        }

    @pytest.mark.asyncio
    async def test_error_status_returned_not_raised(self):
        """Endpoint rejections are passed back verbatim."""
        client = HttpRegistrationClient(
            "http://auth.local/sign-up/email",
            transport=httpx.MockTransport(
                lambda request: httpx.Response(
                    422, json={"code": "USER_ALREADY_EXISTS"}
                )
            ),
        )

        result = await client.register(PAYLOAD, headers={})

        assert result.status_code == 422
        assert result.body == {"code": "USER_ALREADY_EXISTS"}

    @pytest.mark.asyncio
    async def test_text_body_kept(self):
        client = HttpRegistrationClient(
            "http://auth.local/sign-up/email",
            transport=httpx.MockTransport(
                lambda request: httpx.Response(201, text="created")
            ),
        )

        result = await client.register(PAYLOAD, headers={})

        assert result.status_code == 201
        assert result.body == "created"

    @pytest.mark.asyncio
    async def test_transport_failure_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = HttpRegistrationClient(
            "http://auth.local/sign-up/email",
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(RegistrationError):
            await client.register(PAYLOAD, headers={})
