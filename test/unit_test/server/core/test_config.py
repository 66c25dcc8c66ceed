"""Unit tests for server configuration settings model.

Tests verify that the Settings model correctly binds environment variables
from the .env.example file and that the grouped configuration models are
built from them.
"""

from pathlib import Path

import pytest

from scavenger_hunt_ai.server.core.config import CORSConfig, GenerationConfig, JWTConfig, RateLimitConfig, Settings


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parent.parent.parent.parent.parent / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_env_example_lists_every_setting(self, env_example_vars: dict[str, str]):
        aliases = {field.alias for field in Settings.model_fields.values() if field.alias}
        missing = aliases - set(env_example_vars) - {"CORS_ORIGINS"}
        assert missing == set()

    def test_server_binding(self, env_example_vars: dict[str, str], monkeypatch):
        monkeypatch.setenv("SCAVENGER_HUNT_SERVER_HOST", env_example_vars["SCAVENGER_HUNT_SERVER_HOST"])
        monkeypatch.setenv("SCAVENGER_HUNT_SERVER_PORT", env_example_vars["SCAVENGER_HUNT_SERVER_PORT"])
        monkeypatch.setenv("SCAVENGER_HUNT_LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.server_host == "0.0.0.0"
        assert settings.server_port == 3001
        assert settings.log_level == "DEBUG"

    def test_database_url_binding(self):
        """The test suite runs against an in-memory SQLite database."""
        settings = Settings()
        assert settings.database_url == "sqlite+aiosqlite:///:memory:"

    def test_defaults(self, monkeypatch):
        for name in ("JWT_ALGORITHM", "JWT_EXPIRE_HOURS", "GENERATION_TIMEOUT_SECONDS", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_expire_hours == 24
        assert settings.generation_timeout_seconds == 60.0
        assert settings.cors_origins is None


class TestGroupedConfig:
    """Test the grouped configuration properties."""

    def test_jwt_config(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "s3cret")
        monkeypatch.setenv("JWT_EXPIRE_HOURS", "2")

        jwt_config = Settings().jwt

        assert isinstance(jwt_config, JWTConfig)
        assert jwt_config.secret == "s3cret"
        assert jwt_config.algorithm == "HS256"
        assert jwt_config.expire_hours == 2

    def test_generation_config(self, monkeypatch):
        monkeypatch.setenv("GENERATION_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("IMAGE_BASE_URL", "https://cdn.example.org/img")

        generation = Settings().generation

        assert isinstance(generation, GenerationConfig)
        assert generation.timeout_seconds == 12.5
        assert generation.image_base_url == "https://cdn.example.org/img"

    def test_cors_always_includes_client_url(self, monkeypatch):
        monkeypatch.setenv("CLIENT_URL", "http://localhost:5173")
        monkeypatch.delenv("CORS_ORIGINS", raising=False)

        cors = Settings(_env_file=None).cors

        assert isinstance(cors, CORSConfig)
        assert cors.origins == ["http://localhost:5173"]
        assert cors.allow_credentials is True

    def test_cors_extra_origins(self, monkeypatch):
        monkeypatch.setenv("CLIENT_URL", "http://localhost:5173")
        monkeypatch.setenv("CORS_ORIGINS", '["https://hunts.example.org", "http://localhost:5173"]')

        cors = Settings().cors

        assert cors.origins == ["https://hunts.example.org", "http://localhost:5173"]

    def test_rate_limit_config(self, monkeypatch):
        monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
        monkeypatch.setenv("RATE_LIMIT_DEFAULT", "5/minute")

        rate_limit = Settings().rate_limit

        assert isinstance(rate_limit, RateLimitConfig)
        assert rate_limit.enabled is True
        assert rate_limit.default_limit == "5/minute"

    def test_rate_limit_defaults(self, monkeypatch):
        for name in ("RATE_LIMIT_ENABLED", "RATE_LIMIT_DEFAULT"):
            monkeypatch.delenv(name, raising=False)

        rate_limit = Settings(_env_file=None).rate_limit

        assert rate_limit.enabled is True
        assert rate_limit.default_limit == "100/15minutes"


class TestConfigModels:
    """Test the configuration models can be built by field name."""

    def test_populate_by_name(self):
        assert JWTConfig(secret="x", expire_hours=1).secret == "x"
        assert GenerationConfig(timeout_seconds=3).timeout_seconds == 3
        assert CORSConfig(origins=["a"]).origins == ["a"]
        assert RateLimitConfig(default_limit="1/second").default_limit == "1/second"
