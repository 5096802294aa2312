"""
authconf - Property loading.

Gathers the flat property set from files, an env file, environment
variables and explicit overrides.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import dotenv_values

from .faults import ConfigInvalidFault, ConfigMissingFault
from .properties import Properties

logger = logging.getLogger("authconf.config")

_KEY_VALUE_SUFFIXES = (".properties", ".env", ".cfg")
_YAML_SUFFIXES = (".yaml", ".yml")


class PropertiesLoader:
    """
    Loads and merges properties from multiple sources with precedence:
    overrides > environment variables > env file > property files

    Files are merged in the order given. ``.properties``, ``.env`` and
    ``.cfg`` files are read as ``key=value`` lines; JSON and YAML documents
    are flattened to dotted keys, lists becoming indexed keys:

        cas:
          loginUrl:
            - https://cas-a/login     -> cas.loginUrl.0
            - https://cas-b/login     -> cas.loginUrl.1

    Environment variables use ``__`` as the separator and keep their case:
    ``AUTHCONF_cas__loginUrl__0`` becomes ``cas.loginUrl.0``.
    """

    def __init__(self, env_prefix: str = "AUTHCONF_"):
        self.env_prefix = env_prefix
        self.data: Dict[str, str] = {}

    @classmethod
    def load(
        cls,
        paths: Optional[list[str]] = None,
        env_prefix: str = "AUTHCONF_",
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> Properties:
        """
        Load properties from every source.

        Merge order (later overrides earlier):
        1. Property files in ``paths`` order
        2. ``env_file`` (only keys carrying ``env_prefix``)
        3. Environment variables carrying ``env_prefix``
        4. Manual overrides

        Args:
            paths: Property, JSON or YAML files
            env_prefix: Prefix for environment variables
            env_file: Path to a .env file
            overrides: Manual overrides (highest precedence)

        Returns:
            Immutable ``Properties``
        """
        loader = cls(env_prefix=env_prefix)

        for path in paths or ():
            loader.load_file(path)

        if env_file:
            loader._load_env_file(env_file)

        loader._load_from_env()

        if overrides:
            loader._merge(overrides, source="overrides")

        logger.debug("Loaded %d properties", len(loader.data))
        return Properties(loader.data)

    # ------------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------------

    def load_file(self, path: str | Path):
        """Merge one file, selecting the reader by suffix."""
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigMissingFault(str(file_path))

        suffix = file_path.suffix.lower()
        if suffix == ".json":
            self._load_json_file(file_path)
        elif suffix in _YAML_SUFFIXES:
            self._load_yaml_file(file_path)
        elif suffix in _KEY_VALUE_SUFFIXES or not suffix:
            self._load_key_value_file(file_path)
        else:
            raise ConfigInvalidFault(str(file_path), f"unsupported file type '{suffix}'")

    def _load_key_value_file(self, path: Path):
        """Load ``key=value`` lines; keys without a value are dropped."""
        values = dotenv_values(path)
        self._merge({k: v for k, v in values.items() if v is not None}, source=str(path))

    def _load_json_file(self, path: Path):
        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ConfigInvalidFault(str(path), f"invalid JSON: {exc}") from exc
        self._merge_document(data, path)

    def _load_yaml_file(self, path: Path):
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigInvalidFault(str(path), f"invalid YAML: {exc}") from exc
        if data:
            self._merge_document(data, path)

    def _merge_document(self, data: Any, path: Path):
        if not isinstance(data, dict):
            raise ConfigInvalidFault(str(path), "top-level document must be a mapping")
        self._merge(flatten(data), source=str(path))

    # ------------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------------

    def _load_env_file(self, path: str):
        """Load prefixed keys from a .env file."""
        env_path = Path(path)
        if not env_path.exists():
            logger.debug("Env file %s not found, skipping", env_path)
            return

        for key, value in dotenv_values(env_path).items():
            if value is not None and key.startswith(self.env_prefix):
                self._set_from_env(key, value)

    def _load_from_env(self):
        for key, value in os.environ.items():
            if key.startswith(self.env_prefix):
                self._set_from_env(key, value)

    def _set_from_env(self, key: str, value: str):
        """Convert AUTHCONF_cas__loginUrl__0 to cas.loginUrl.0."""
        key = key[len(self.env_prefix):]
        if not key:
            return
        self.data[".".join(key.split("__"))] = value

    def _merge(self, values: Dict[str, Any], source: str):
        for key, value in values.items():
            self.data[str(key)] = _to_property_value(key, value, source)


# ============================================================================
# Helpers
# ============================================================================

def _to_property_value(key: str, value: Any, source: str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigInvalidFault(key, f"unsupported value type {type(value).__name__} in {source}")


def flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """
    Flatten nested mappings to dotted keys.

    Lists become indexed keys; ``None`` values are dropped.

        >>> flatten({"cas": {"loginUrl": ["a", "b"]}, "anonymous": True})
        {'cas.loginUrl.0': 'a', 'cas.loginUrl.1': 'b', 'anonymous': True}
    """
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(flatten(value, full_key))
        elif isinstance(value, list):
            flat.update(flatten({str(i): item for i, item in enumerate(value)}, full_key))
        elif value is not None:
            flat[full_key] = value
    return flat
