"""Shared fixtures."""

from __future__ import annotations

import random

import pytest

from testnumbers.core.config import AppSettings, GeneratorConfig


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(environment="test", generator=GeneratorConfig(seed=1234))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
