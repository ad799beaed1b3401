"""Unit tests for configuration resolution.

These tests verify:
- Defaults when nothing is configured.
- Precedence: programmatic > environment > defaults.
- Scopes, and that overrides are validated and normalized everywhere.
"""

import pytest

from broadcast_periods.config import (
    FrozenConfig,
    ParserSettings,
    config_override,
    config_scope,
    resolve_config,
)
from broadcast_periods.core.exceptions import ConfigurationError
from broadcast_periods.frontdoor import create_parser


class TestResolution:
    @pytest.mark.unit
    def test_defaults(self):
        assert resolve_config() == FrozenConfig(
            failure_mode="diagnostic", aggregation="all_or_nothing", sort_by_duration=False
        )

    @pytest.mark.unit
    def test_environment_overrides_defaults(self, monkeypatch):
        monkeypatch.setenv("BROADCAST_PERIODS_AGGREGATION", "Lenient")
        monkeypatch.setenv("BROADCAST_PERIODS_SORT_BY_DURATION", "true")

        resolved = resolve_config()

        assert resolved.aggregation == "lenient"
        assert resolved.sort_by_duration is True
        assert resolved.failure_mode == "diagnostic"

    @pytest.mark.unit
    def test_programmatic_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("BROADCAST_PERIODS_FAILURE_MODE", "silent")
        monkeypatch.setenv("BROADCAST_PERIODS_AGGREGATION", "all-or-nothing")

        resolved = resolve_config({"aggregation": "LENIENT"})

        assert resolved.aggregation == "lenient"
        assert resolved.failure_mode == "silent"

    @pytest.mark.unit
    def test_invalid_env_value_raises(self, monkeypatch):
        monkeypatch.setenv("BROADCAST_PERIODS_FAILURE_MODE", "loud")

        with pytest.raises(ConfigurationError, match="failure_mode"):
            resolve_config()

    @pytest.mark.unit
    def test_invalid_programmatic_value_raises(self):
        with pytest.raises(ConfigurationError, match="aggregation"):
            resolve_config({"aggregation": "some"})

    @pytest.mark.unit
    def test_unknown_programmatic_fields_are_ignored(self):
        assert resolve_config({"colour": "blue"}) == FrozenConfig()

    @pytest.mark.unit
    def test_settings_normalize_spellings(self):
        settings = ParserSettings(failure_mode=" Silent ", aggregation="All-Or-Nothing")

        assert settings.freeze() == FrozenConfig(failure_mode="silent")


class TestFrozenConfig:
    @pytest.mark.unit
    def test_is_immutable(self):
        frozen = resolve_config({"failure_mode": "silent"})

        assert frozen == FrozenConfig(failure_mode="silent")
        with pytest.raises(AttributeError):
            frozen.failure_mode = "diagnostic"  # type: ignore[misc]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"failure_mode": "Silent"},
            {"aggregation": "Lenient"},
            {"sort_by_duration": "yes"},
        ],
    )
    def test_rejects_values_outside_the_schema(self, kwargs):
        with pytest.raises(ConfigurationError):
            FrozenConfig(**kwargs)


class TestScopes:
    @pytest.mark.unit
    def test_config_scope_replaces_resolution(self, monkeypatch):
        scoped = FrozenConfig(aggregation="lenient")
        monkeypatch.setenv("BROADCAST_PERIODS_AGGREGATION", "all_or_nothing")

        with config_scope(scoped):
            assert resolve_config() is scoped

        assert resolve_config().aggregation == "all_or_nothing"

    @pytest.mark.unit
    def test_environment_does_not_leak_into_scoped_overrides(self, monkeypatch):
        monkeypatch.setenv("BROADCAST_PERIODS_FAILURE_MODE", "silent")

        with config_scope(FrozenConfig()):
            resolved = resolve_config({"sort_by_duration": True})

        assert resolved == FrozenConfig(sort_by_duration=True)

    @pytest.mark.unit
    def test_mixed_case_override_inside_a_scope_is_normalized(self, raw_shows):
        with config_scope(FrozenConfig()):
            resolved = resolve_config({"aggregation": "Lenient"})
            with config_override(aggregation="Lenient"):
                parser = create_parser()

        assert resolved.aggregation == "lenient"
        assert parser.config.aggregation == "lenient"
        outcome = parser.parse(raw_shows)
        assert len(outcome.value) == 4

    @pytest.mark.unit
    def test_invalid_override_inside_a_scope_raises(self):
        with config_scope(FrozenConfig()), pytest.raises(ConfigurationError):
            resolve_config({"aggregation": "bogus"})

    @pytest.mark.unit
    def test_config_override(self):
        with config_override(sort_by_duration=True, failure_mode="SILENT"):
            assert resolve_config() == FrozenConfig(
                failure_mode="silent", sort_by_duration=True
            )

        assert resolve_config() == FrozenConfig()

    @pytest.mark.unit
    def test_nested_overrides_build_on_the_outer_scope(self):
        with config_override(aggregation="lenient"), config_override(sort_by_duration=True):
            assert resolve_config() == FrozenConfig(
                aggregation="lenient", sort_by_duration=True
            )
