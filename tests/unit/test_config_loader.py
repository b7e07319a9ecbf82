"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Config loading, profile merging, env overrides
    ✅ Error Handling: Invalid values, missing files
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from recovery_resolver.config.loader import ConfigLoader, load_config
from recovery_resolver.config.models import ResolverConfig
from recovery_resolver.observability.observability_manager import ObservabilityManager


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_sample_yaml(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Sample YAML configuration file
        EXPECTED: ResolverConfig with the file's values
        """
        # Arrange
        loader = ConfigLoader(environ={})

        # Act
        config = loader.load(sample_config_path)

        # Assert
        assert isinstance(config, ResolverConfig)
        assert config.retry.max_attempts == 4
        assert config.retry.base_delay_seconds == 0.5
        assert config.observability.log_level == "DEBUG"
        assert config.observability.level_number == logging.DEBUG
        assert config.observability.service_name == "inventory_service"

    def test_applies_defaults(self) -> None:
        """
        SCENARIO: Minimal config with only a version
        EXPECTED: Defaults applied for missing sections
        """
        config = ConfigLoader(environ={}).load_from_dict({"version": "1.0"})

        assert config.retry.max_attempts == 3
        assert config.retry.max_delay_seconds == 30.0
        assert config.observability.use_json is True

    def test_validates_invalid_config(self, tmp_path: Path) -> None:
        """
        SCENARIO: Config with max_attempts below 1
        EXPECTED: ValidationError raised
        """
        config_file = tmp_path / "config.yaml"
        config_file.write_text("retry:\n  max_attempts: 0\n")

        with pytest.raises(ValidationError):
            ConfigLoader(base_path=tmp_path, environ={}).load("config.yaml")

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            ConfigLoader(environ={}).load_from_dict({"observability": {"log_level": "LOUD"}})

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ConfigLoader(base_path=tmp_path, environ={}).load("absent.yaml")

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            ConfigLoader(base_path=tmp_path, environ={}).load(config_file)


class TestProfiles:
    """Test cases for profile overlays."""

    def test_profile_merged_over_base(self, fixtures_dir: Path) -> None:
        """
        SCENARIO: Base config plus "aggressive" profile
        EXPECTED: Profile values win, untouched keys kept
        """
        loader = ConfigLoader(base_path=fixtures_dir, environ={})

        config = loader.load("sample_config.yaml", profile="aggressive")

        assert config.retry.max_attempts == 8
        assert config.retry.base_delay_seconds == 0.1
        assert config.retry.max_delay_seconds == 10.0

    def test_missing_profile(self, fixtures_dir: Path) -> None:
        loader = ConfigLoader(base_path=fixtures_dir, environ={})

        with pytest.raises(FileNotFoundError, match="Profile not found: relaxed"):
            loader.load("sample_config.yaml", profile="relaxed")


class TestEnvironmentOverrides:
    """Test cases for RECOVERY_RESOLVER_* variables."""

    def test_nested_override(self, sample_config_path: Path) -> None:
        loader = ConfigLoader(
            environ={
                "RECOVERY_RESOLVER_RETRY__MAX_ATTEMPTS": "6",
                "RECOVERY_RESOLVER_OBSERVABILITY__USE_JSON": "true",
                "UNRELATED": "ignored",
            }
        )

        config = loader.load(sample_config_path)

        assert config.retry.max_attempts == 6
        assert config.observability.use_json is True

    def test_load_config_convenience(self, fixtures_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECOVERY_RESOLVER_RETRY__BASE_DELAY_SECONDS", "0.25")

        config = load_config("sample_config.yaml", base_path=fixtures_dir)

        assert config.retry.base_delay_seconds == 0.25


class TestObservabilityFromConfig:
    def test_manager_uses_config(self, default_config: ResolverConfig) -> None:
        manager = ObservabilityManager.from_config(default_config.observability)

        assert manager.service_name == "recovery_resolver"
        assert manager.log_level == logging.INFO

    def test_disabled_config_yields_no_manager(self, default_config: ResolverConfig) -> None:
        """
        SCENARIO: observability.enabled is false
        EXPECTED: No manager; components run without an observer
        """
        config = default_config.observability.model_copy(update={"enabled": False})

        assert ObservabilityManager.from_config(config) is None

    def test_enabled_flag_from_env(self, sample_config_path: Path) -> None:
        loader = ConfigLoader(environ={"RECOVERY_RESOLVER_OBSERVABILITY__ENABLED": "false"})

        config = loader.load(sample_config_path)

        assert config.observability.enabled is False
        assert ObservabilityManager.from_config(config.observability) is None
