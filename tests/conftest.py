"""Shared pytest fixtures for texthighlight tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from texthighlight.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear MARKERS__* env vars and the cached Settings around each test.

    Tests that need specific settings set env vars via ``monkeypatch`` and
    then call ``get_settings()``, or construct ``Settings(_env_file=None)``.
    """
    for key in list(os.environ):
        if key.startswith("MARKERS__"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
