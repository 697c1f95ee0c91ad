from __future__ import annotations

import pytest

from loosever.config import CACHE_SIZE_ENV_VAR, CONFIG_PATH_ENV_VAR
from loosever.parsers import reset_default_parser


@pytest.fixture(autouse=True)
def _isolated_default_parser(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
    monkeypatch.delenv(CACHE_SIZE_ENV_VAR, raising=False)
    reset_default_parser()
    yield
    reset_default_parser()
