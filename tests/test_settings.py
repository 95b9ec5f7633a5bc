"""
Unit Tests for Application Settings and the Container

Tests for:
- Default values of nested settings
- Environment variable overrides, including nested ones
- Log level validation
- Settings caching and clearing
- Lazy container wiring
"""

import pytest
from pydantic import ValidationError

from streaming_simulator.config.container import Container, create_container
from streaming_simulator.config.settings import (
    MonetizationSettings,
    PlaybackSettings,
    Settings,
    StatisticsSettings,
    clear_settings_cache,
    get_settings,
)

# =============================================================================
# Nested Settings Tests
# =============================================================================


class TestNestedSettings:
    """Unit tests for the nested settings models."""

    def test_defaults(self):
        """Should default to the simulation constants."""
        assert PlaybackSettings().skip_seconds == 90
        assert MonetizationSettings().premium_pool == 1_000_000.0
        assert MonetizationSettings().round_digits == 2
        assert StatisticsSettings().top_limit == 5

    def test_alias_accepted(self):
        """Should accept the short alias for the skip step."""
        assert PlaybackSettings(skip=30).skip_seconds == 30

    @pytest.mark.parametrize("value", [0, 3601])
    def test_skip_out_of_range(self, value):
        """Should reject skip steps outside 1..3600."""
        with pytest.raises(ValidationError):
            PlaybackSettings(skip_seconds=value)

    def test_negative_pool_rejected(self):
        """Should reject a negative premium pool."""
        with pytest.raises(ValidationError):
            MonetizationSettings(premium_pool=-1.0)

    def test_frozen(self):
        """Should not allow mutation after creation."""
        settings = StatisticsSettings()
        with pytest.raises(ValidationError):
            settings.top_limit = 3


# =============================================================================
# Settings Tests
# =============================================================================


class TestSettings:
    """Unit tests for the top-level settings."""

    def test_defaults(self, monkeypatch):
        """Should load defaults when nothing is configured."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("DEBUG", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.playback.skip_seconds == 90

    def test_nested_env_override(self, monkeypatch):
        """Should read nested values with the double-underscore delimiter."""
        monkeypatch.setenv("PLAYBACK__SKIP_SECONDS", "30")
        monkeypatch.setenv("MONETIZATION__PREMIUM_POOL", "500")

        settings = Settings(_env_file=None)

        assert settings.playback.skip_seconds == 30
        assert settings.monetization.premium_pool == 500.0

    def test_log_level_normalized(self):
        """Should upper-case valid log levels."""
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Should reject unknown log levels."""
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None, log_level="chatty")

    def test_invalid_environment(self):
        """Should reject unknown environments."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="staging")

    def test_effective_log_level(self):
        """Should force DEBUG in debug mode."""
        assert Settings(_env_file=None, debug=True, log_level="ERROR").effective_log_level == "DEBUG"
        assert Settings(_env_file=None, log_level="ERROR").effective_log_level == "ERROR"

    def test_get_settings_is_cached(self):
        """Should return the same instance until the cache is cleared."""
        clear_settings_cache()
        first = get_settings()

        assert get_settings() is first
        clear_settings_cache()
        assert get_settings() is not first
        clear_settings_cache()


# =============================================================================
# Container Tests
# =============================================================================


class TestContainer:
    """Unit tests for lazy dependency wiring."""

    @pytest.fixture
    def scenario(self, scenario_document):
        from streaming_simulator.infrastructure.scenario.loader import build_scenario
        from streaming_simulator.infrastructure.scenario.models import ScenarioFile

        return build_scenario(ScenarioFile.model_validate(scenario_document))

    def test_scenario_required(self):
        """Should refuse to build scenario-bound components without a scenario."""
        container = Container(Settings(_env_file=None))

        with pytest.raises(RuntimeError, match="Scenario not loaded"):
            _ = container.player_service

    def test_components_are_cached(self, scenario):
        """Should create each component once."""
        container = create_container(Settings(_env_file=None), scenario)

        assert container.player_service is container.player_service
        assert container.simulation_runner is container.simulation_runner
        assert container.listen_ledger is container.listen_ledger

    def test_settings_flow_into_components(self, scenario):
        """Should configure ledgers and services from settings."""
        settings = Settings(
            _env_file=None,
            monetization=MonetizationSettings(premium_pool=42.0),
            playback=PlaybackSettings(skip_seconds=15),
        )
        container = create_container(settings, scenario)

        assert container.revenue_ledger.premium_pool == 42.0
        assert container.player_service.engine_for("alice")._skip_seconds == 15

    def test_track_listens_handler_shares_ledger(self, scenario):
        """Should read the same ledger the players write to."""
        from streaming_simulator.application.queries.get_track_listens import GetTrackListensQuery

        container = create_container(Settings(_env_file=None), scenario)
        container.player_service.load("alice", "song", "solo")

        info = container.track_listens_handler.handle(GetTrackListensQuery(track_name="solo"))

        assert info.total_plays == 1
