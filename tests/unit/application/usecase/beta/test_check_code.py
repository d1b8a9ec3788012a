"""Tests for check code use case."""

import pytest

from betagate.application.usecase.beta import CheckCodeRequest, CheckCodeUseCase
from betagate.domain.service import BetaInviteService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCheckCodeUseCase:
    """Tests for CheckCodeUseCase."""

    @pytest.mark.asyncio
    async def test_known_code(self, unit_env):
        # Arrange
        service = await unit_env.get(BetaInviteService)
        use_case = await unit_env.get(CheckCodeUseCase)
        invite = await service.mint_invite(wildcard=True)

        # Act
        response = await use_case.execute(CheckCodeRequest(code=invite.code.root))

        # Assert
        assert response.status is True
        assert response.wildcard is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", [None, "", "missing"])
    async def test_missing_or_unknown_code(self, unit_env, code):
        """Misses never raise and carry no wildcard flag."""
        use_case = await unit_env.get(CheckCodeUseCase)

        response = await use_case.execute(CheckCodeRequest(code=code))

        assert response.status is False
        assert response.wildcard is None
