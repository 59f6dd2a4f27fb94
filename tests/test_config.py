"""Tests for settings, seeding and logging setup."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from py_hexgen.config import Settings
from py_hexgen.core.alea_prng import AleaPRNG
from py_hexgen.utils import random as random_utils
from py_hexgen.utils.logging import configure_logging
from py_hexgen.utils.random import create_prng, random_seed


class TestSettings:
    """Test environment driven settings."""

    def test_defaults(self, monkeypatch):
        """Test default values without any environment."""
        for name in ("LOG_LEVEL", "LOG_FORMAT", "DEFAULT_SEED", "FEATURE_CHANCE",
                     "REGION_RADIUS", "FACTION_RELATIONSHIP_SCOPE"):
            monkeypatch.delenv(f"HEXGEN_{name}", raising=False)

        config = Settings(_env_file=None)

        assert config.log_level == "INFO"
        assert config.log_format == "json"
        assert config.default_seed is None
        assert config.feature_chance == 15
        assert config.region_radius == 2
        assert config.faction_relationship_scope == "all"

    def test_environment_overrides(self, monkeypatch):
        """Test HEXGEN_* variables override the defaults."""
        monkeypatch.setenv("HEXGEN_FEATURE_CHANCE", "40")
        monkeypatch.setenv("HEXGEN_DEFAULT_SEED", "campaign-1")
        monkeypatch.setenv("HEXGEN_FACTION_RELATIONSHIP_SCOPE", "neighbors")

        config = Settings(_env_file=None)

        assert config.feature_chance == 40
        assert config.default_seed == "campaign-1"
        assert config.faction_relationship_scope == "neighbors"

    @pytest.mark.parametrize(
        "name,value",
        [
            ("HEXGEN_FEATURE_CHANCE", "150"),
            ("HEXGEN_REGION_RADIUS", "-1"),
            ("HEXGEN_LOG_FORMAT", "xml"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        """Test invalid settings are rejected."""
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestCreatePRNG:
    """Test PRNG creation."""

    def test_explicit_seed(self):
        """Test an explicit seed is used as given."""
        prng = create_prng("my-seed")
        assert prng.seed == "my-seed"
        assert prng.random() == AleaPRNG("my-seed").random()

    def test_settings_seed(self, monkeypatch):
        """Test the configured default seed is used when none is given."""
        monkeypatch.setattr(random_utils.settings, "default_seed", "from-settings")
        assert create_prng().seed == "from-settings"

    def test_random_seed(self, monkeypatch):
        """Test a fresh seed is drawn when nothing is configured."""
        monkeypatch.setattr(random_utils.settings, "default_seed", None)
        prng = create_prng()
        assert isinstance(prng.seed, str)
        assert prng.seed.isdigit()
        assert len({random_seed() for _ in range(10)}) > 1


class TestConfigureLogging:
    """Test structlog configuration."""

    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_json_renderer(self):
        """Test the JSON renderer is the last processor by default."""
        configure_logging(level="debug", fmt="json")

        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        assert logging.getLogger().level == logging.DEBUG

    def test_console_renderer(self):
        """Test the console renderer for local development."""
        configure_logging(level="WARNING", fmt="console")

        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)
        assert logging.getLogger().level == logging.WARNING
