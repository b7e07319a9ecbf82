"""
Configuration Loader - YAML Loading with Validation.

Loads resolver configuration from YAML, overlays an optional profile and
environment variables, then validates using Pydantic models.

Environment overrides use the prefix RECOVERY_RESOLVER_ and a double
underscore between nesting levels, e.g.
RECOVERY_RESOLVER_RETRY__MAX_ATTEMPTS=5.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from recovery_resolver.config.models import ResolverConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "RECOVERY_RESOLVER_"


class ConfigLoader:
    """Loads and validates resolver configuration."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        profile_dir: Union[str, Path] = Path("config") / "profiles",
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
            profile_dir: Profile directory, relative to base_path
            environ: Environment mapping for overrides (default: os.environ)
        """
        self._base_path = base_path or Path(".")
        self._profile_dir = self._base_path / profile_dir
        self._environ = os.environ if environ is None else environ

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> ResolverConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name to merge

        Returns:
            Validated ResolverConfig object

        Raises:
            FileNotFoundError: If config or profile file doesn't exist
            ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        config_dict = self._load_yaml(path)

        if profile:
            config_dict = self._merge_configs(config_dict, self._load_profile(profile))

        return self.load_from_dict(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ResolverConfig:
        """
        Validate a configuration dictionary after applying env overrides.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated ResolverConfig object
        """
        merged = self._merge_configs(config_dict, self._env_overrides())
        return ResolverConfig.model_validate(merged)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping: {path}")
        return data

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        profile_path = self._profile_dir / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        logger.debug(f"Applying config profile {profile} from {profile_path}")
        return self._load_yaml(profile_path)

    def _env_overrides(self) -> Dict[str, Any]:
        """Collect prefixed environment variables into a nested dict."""
        overrides: Dict[str, Any] = {}
        for key, value in self._environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            path = key[len(ENV_PREFIX):].lower().split("__")
            node = overrides
            for part in path[:-1]:
                node = node.setdefault(part, {})
            # YAML scalars: "5" -> 5, "false" -> False
            node[path[-1]] = yaml.safe_load(value)
        return overrides

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> ResolverConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths

    Returns:
        Validated ResolverConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path, profile)
