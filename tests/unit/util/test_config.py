"""Unit tests for settings loading and the config provider."""

import pytest
from dishka import make_async_container

from connector.config import AuthSettings, Settings
from connector.util.di.core import ProdConfigProvider
from connector.util.error import ConfigurationError


class TestSettings:
    def test_nested_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("AUTH__TOKEN_HEADER", "x-session")
        monkeypatch.setenv("AUTH__JWT_EXPIRY_HOURS", "1")

        settings = Settings()

        assert settings.auth.token_header == "x-session"
        assert settings.auth.jwt_expiry_hours == 1

    def test_auth_settings_are_frozen(self):
        settings = AuthSettings()

        with pytest.raises(ValueError):
            settings.jwt_secret = "changed"  # type: ignore[misc]


class TestProdConfigProvider:
    @pytest.mark.asyncio
    async def test_production_refuses_default_secret(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("AUTH__JWT_SECRET", raising=False)
        container = make_async_container(ProdConfigProvider())

        with pytest.raises(ConfigurationError, match="AUTH__JWT_SECRET"):
            await container.get(AuthSettings)

        await container.close()

    @pytest.mark.asyncio
    async def test_production_with_secret(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("AUTH__JWT_SECRET", "a-real-production-secret-value-1234")
        container = make_async_container(ProdConfigProvider())

        auth_settings = await container.get(AuthSettings)

        assert auth_settings.jwt_secret == "a-real-production-secret-value-1234"
        await container.close()
