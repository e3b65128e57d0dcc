"""Shared pytest fixtures for envkeeper tests."""

import pytest

from envkeeper.config import Settings
from envkeeper.core.validator import Validator
from envkeeper.sources import MappingSource


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of ENVKEEPER_* in the test process."""
    return Settings(hidden_marker="[HIDDEN]", preview_length=10, preview_suffix="...")


@pytest.fixture
def source() -> MappingSource:
    """Empty, isolated environment."""
    return MappingSource()


@pytest.fixture
def validator(source: MappingSource, settings: Settings) -> Validator:
    return Validator(source=source, settings=settings)
