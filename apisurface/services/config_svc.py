# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML files, overrides and env vars
#  - Caches composed config
# ======================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

ENV_PREFIX = "APISURFACE_"


class ConfigService:
    """
    Service for loading and caching apisurface configuration.

    Sources, later ones winning:
      1) Built-in defaults
      2) ./config/apisurface.yaml
      3) $APISURFACE_CONFIG (YAML path) or the config_path passed in
      4) overrides dict (CLI flags)
      5) Environment variables APISURFACE_<KEY>, APISURFACE_<SECTION>__<KEY>
    """

    def __init__(self, config_path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> None:
        self._config: dict[str, Any] | None = None
        self._config_path = Path(config_path) if config_path else None
        self._overrides = overrides or {}
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("min_bucket_size.members")
            0
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml(Path.cwd() / "config" / "apisurface.yaml"))

        explicit = self._config_path
        if explicit is None and os.getenv("APISURFACE_CONFIG"):
            explicit = Path(os.environ["APISURFACE_CONFIG"])
        if explicit:
            self._deep_merge(cfg, self._load_yaml(explicit))

        # Overrides with value None mean "flag not given"
        self._deep_merge(cfg, {k: v for k, v in self._overrides.items() if v is not None})

        self._apply_env_overrides(cfg)

        self._logger.debug("Composed config; keys: %s", list(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            # Only projects whose path starts with this are analyzed
            "path_prefix": "src",
            # options report
            "options_suffix": "Options",
            "named_type_kinds": ["class", "record"],
            # members report
            "member_pattern": "subscribe",
            "include_inherited": True,
            # Sections need more than this many types to be reported
            "min_bucket_size": {"types": 1, "options": 1, "members": 0},
            "output_dir": ".",
            "output_files": {
                "types": "public-types.md",
                "options": "public-options.md",
                "members": "public-subscription-members.md",
            },
            "log_level": "INFO",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """
        Load a YAML mapping; returns {} if the file is missing or unusable.
        """
        if not path.is_file():
            return {}
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning("Ignoring config file %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            self._logger.warning("Ignoring config file %s: top level is not a mapping", path)
            return {}
        self._logger.info("Loaded config file %s", path)
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          APISURFACE_PATH_PREFIX=src/Core
          APISURFACE_INCLUDE_INHERITED=false
          APISURFACE_MIN_BUCKET_SIZE__MEMBERS=2
          APISURFACE_NAMED_TYPE_KINDS=class,record,struct

        Values are coerced to the type of the value they replace. Values that
        do not fit, and scalars aimed at a whole section, are ignored.
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == "APISURFACE_CONFIG":
                continue

            key = k[len(ENV_PREFIX) :].lower()
            if not key:
                continue

            target = cfg
            if "__" in key:
                section, key = key.split("__", 1)
                if not isinstance(cfg.get(section), dict):
                    self._logger.warning("Ignoring %s: '%s' is not a config section", k, section)
                    continue
                target = cfg[section]

            try:
                target[key] = self._coerce_env_value(v, target.get(key))
            except ValueError as e:
                self._logger.warning("Ignoring %s: %s", k, e)

    def _coerce_env_value(self, raw: str, current: Any) -> Any:
        """Convert raw to the type of current; plain strings when there is no current value."""
        if isinstance(current, dict):
            raise ValueError("a section cannot be set from a single value")
        if isinstance(current, bool):
            if raw.lower() not in ("true", "false"):
                raise ValueError(f"expected true or false, got {raw!r}")
            return raw.lower() == "true"
        if isinstance(current, int):
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"expected an integer, got {raw!r}") from None
        if isinstance(current, list):
            return [item.strip() for item in raw.split(",") if item.strip()]
        return raw
