"""Tests for add beta user use case."""

import pytest

from betagate.application.usecase.beta import (
    AddBetaUserRequest,
    AddBetaUserUseCase,
    BetaInviteItem,
)
from betagate.domain.error import DuplicateUserError, InvalidRequestError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddBetaUserUseCase:
    """Tests for AddBetaUserUseCase."""

    @pytest.mark.asyncio
    async def test_returns_created_invite(self, unit_env):
        """The created invite, code included, is returned."""
        # Arrange
        use_case = await unit_env.get(AddBetaUserUseCase)

        # Act
        item = await use_case.execute(AddBetaUserRequest(email="a@x.com"))

        # Assert
        assert isinstance(item, BetaInviteItem)
        assert item.email == "a@x.com"
        assert len(item.code) == 32
        assert item.wildcard is False
        assert item.golden_ticket is False

    @pytest.mark.asyncio
    async def test_serializes_camel_case(self, unit_env):
        """API view uses camelCase keys."""
        # Arrange
        use_case = await unit_env.get(AddBetaUserUseCase)

        # Act
        item = await use_case.execute(
            AddBetaUserRequest(wildcard=True, golden_ticket=True)
        )
        data = item.model_dump(mode="json", by_alias=True)

        # Assert
        assert set(data) == {
            "id",
            "email",
            "code",
            "wildcard",
            "goldenTicket",
            "addedAt",
        }
        assert data["goldenTicket"] is True
        assert data["email"] is None

    @pytest.mark.asyncio
    async def test_invalid_request(self, unit_env):
        """Neither email nor wildcard is rejected."""
        use_case = await unit_env.get(AddBetaUserUseCase)

        with pytest.raises(InvalidRequestError):
            await use_case.execute(AddBetaUserRequest())

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env):
        """Second invite for an email is rejected."""
        use_case = await unit_env.get(AddBetaUserUseCase)
        await use_case.execute(AddBetaUserRequest(email="a@x.com"))

        with pytest.raises(DuplicateUserError):
            await use_case.execute(AddBetaUserRequest(email="a@x.com"))
