"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from betagate.config import BetaSettings, Settings


class TestBetaSettings:
    def test_code_length_bounded_by_invite_code_limit(self):
        with pytest.raises(ValidationError):
            BetaSettings(code_length=300)

        with pytest.raises(ValidationError):
            BetaSettings(code_length=0)

        assert BetaSettings(code_length=255).code_length == 255


class TestRegistrationUrl:
    def test_defaults_to_own_signup_path_in_development(self):
        settings = Settings(environment="development")

        assert settings.beta.registration_url == (
            f"{settings.api.base_url}{settings.beta.signup_path}"
        )

    def test_required_in_production(self):
        with pytest.raises(ValidationError):
            Settings(
                environment="production",
                host="api.example.com",
                frontend_host="example.com",
            )

    def test_explicit_url_kept_in_production(self):
        # Arrange
        beta = BetaSettings(registration_url="https://auth.example.com/sign-up/email")

        # Act
        settings = Settings(
            environment="production",
            host="api.example.com",
            frontend_host="example.com",
            beta=beta,
        )

        # Assert
        assert settings.beta.registration_url == (
            "https://auth.example.com/sign-up/email"
        )
        assert settings.api.base_url.startswith("https://")
