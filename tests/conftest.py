from __future__ import annotations

from collections.abc import Iterator

import pytest

from jsdoc_parts.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def strict_parts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSDOC_STRICT_PARTS", "1")
    get_settings.cache_clear()


@pytest.fixture
def lenient_parts(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSDOC_STRICT_PARTS", "0")
    get_settings.cache_clear()
