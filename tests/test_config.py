from __future__ import annotations

import json
from pathlib import Path

import pytest

from loosever.config import (
    CACHE_SIZE_ENV_VAR,
    CONFIG_PATH_ENV_VAR,
    DEFAULT_CACHE_SIZE,
    ConfigError,
    ParserOptions,
    load_options,
    validate_options,
)


def _write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "loosever.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_defaults() -> None:
    assert load_options() == ParserOptions(cache_size=DEFAULT_CACHE_SIZE)
    assert ParserOptions().to_dict() == {"cacheSize": 20}


def test_explicit_path(tmp_path: Path) -> None:
    path = _write(tmp_path, {"cacheSize": 5})
    assert load_options(path).cache_size == 5
    assert load_options(str(path)).cache_size == 5


def test_empty_document_uses_defaults(tmp_path: Path) -> None:
    assert load_options(_write(tmp_path, {})).cache_size == DEFAULT_CACHE_SIZE


def test_env_path_beats_env_size(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(_write(tmp_path, {"cacheSize": 0})))
    monkeypatch.setenv(CACHE_SIZE_ENV_VAR, "9")
    assert load_options().cache_size == 0


def test_explicit_path_beats_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CACHE_SIZE_ENV_VAR, "9")
    assert load_options(_write(tmp_path, {"cacheSize": 3})).cache_size == 3


def test_env_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CACHE_SIZE_ENV_VAR, " 42 ")
    assert load_options().cache_size == 42


@pytest.mark.parametrize("value", ["many", "1.5", "-1"])
def test_invalid_env_size(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv(CACHE_SIZE_ENV_VAR, value)
    with pytest.raises(ConfigError):
        load_options()


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_options(tmp_path / "absent.json")


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{cacheSize: 3", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_options(path)


@pytest.mark.parametrize(
    "payload",
    [{"cacheSize": -1}, {"cacheSize": "20"}, {"cacheSize": 2.5}, {"cache": 3}, [1, 2]],
)
def test_schema_violations(tmp_path: Path, payload: object) -> None:
    with pytest.raises(ConfigError, match="Invalid parser options"):
        load_options(_write(tmp_path, payload))


def test_validate_options_accepts_valid_document() -> None:
    validate_options({"cacheSize": 0})


@pytest.mark.parametrize("size", [-1, "3", True])
def test_options_reject_bad_sizes(size: object) -> None:
    with pytest.raises(ConfigError):
        ParserOptions(cache_size=size)  # type: ignore[arg-type]
