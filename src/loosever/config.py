"""Parser option loading.

Options come from a JSON file or from environment variables. A JSON file is
validated against ``options.schema.json`` (shipped next to this module) with
``jsonschema`` before it is turned into a :class:`ParserOptions`.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().with_name("options.schema.json")
CONFIG_PATH_ENV_VAR = "LOOSEVER_CONFIG"
CACHE_SIZE_ENV_VAR = "LOOSEVER_CACHE_SIZE"
DEFAULT_CACHE_SIZE = 20


class ConfigError(RuntimeError):
    """Raised when parser options cannot be loaded or are invalid."""


@dataclass(slots=True, frozen=True)
class ParserOptions:
    """Tunables for a :class:`~loosever.parsers.loose.VersionParser`."""

    cache_size: int = DEFAULT_CACHE_SIZE

    def __post_init__(self) -> None:
        if isinstance(self.cache_size, bool) or not isinstance(self.cache_size, int):
            raise ConfigError(f"cache_size must be an integer, got {self.cache_size!r}")
        if self.cache_size < 0:
            raise ConfigError(f"cache_size must be non-negative, got {self.cache_size}")

    def to_dict(self) -> dict[str, int]:
        return {"cacheSize": self.cache_size}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParserOptions:
        return cls(cache_size=data.get("cacheSize", DEFAULT_CACHE_SIZE))


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_options(document: Any) -> None:
    """Validate a decoded options document against the packaged schema.

    Raises:
        ConfigError: If the document does not conform.
    """
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ConfigError("Invalid parser options:\n" + _format_errors(errors))


def _load_file(path: Path) -> ParserOptions:
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    validate_options(data)
    return ParserOptions.from_dict(data)


def _cache_size_from_env(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{CACHE_SIZE_ENV_VAR} must be an integer, got {raw!r}") from exc


def load_options(path: Path | str | None = None) -> ParserOptions:
    """Resolve parser options.

    Priority:
    1. Explicit ``path`` argument
    2. LOOSEVER_CONFIG environment variable (path to a JSON file)
    3. LOOSEVER_CACHE_SIZE environment variable
    4. Defaults

    Raises:
        ConfigError: If the selected source is missing or invalid.
    """
    if path is not None:
        logger.debug("Loading parser options from %s", path)
        return _load_file(Path(path))

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        logger.debug("Loading parser options from %s=%s", CONFIG_PATH_ENV_VAR, env_path)
        return _load_file(Path(env_path))

    env_size = os.environ.get(CACHE_SIZE_ENV_VAR)
    if env_size:
        return ParserOptions(cache_size=_cache_size_from_env(env_size))

    return ParserOptions()
