from __future__ import annotations

from typing import List

import pytest

from standup import Category, Member
from standup.core import config as config_module


class FakePermutationSource:
    """Returns a reversing permutation and records requested sizes."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: List[int] = []
        self.error = error

    def generate_permutation(self, n: int) -> List[int]:
        self.calls.append(n)
        if self.error is not None:
            raise self.error
        return list(reversed(range(n)))


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    for name in ("STANDUP_API_KEY", "STANDUP_API_URI", "STANDUP_RETRY_ATTEMPTS"):
        monkeypatch.delenv(name, raising=False)
    config_module.get_settings.cache_clear()
    yield
    config_module.get_settings.cache_clear()


@pytest.fixture
def fake_source() -> FakePermutationSource:
    return FakePermutationSource()


@pytest.fixture
def sample_roster() -> list[Member]:
    return [
        Member("Alex Trebek", Category.BOSS),
        Member("Sam", Category.WORKER),
        Member("Dana", Category.WORKER),
        Member("Zaphod Beeblebrox", Category.SOMETIMES),
    ]


@pytest.fixture
def failing_source():
    def factory(error: Exception) -> FakePermutationSource:
        return FakePermutationSource(error=error)

    return factory
