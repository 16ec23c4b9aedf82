"""Shared fixtures for integration tests."""

import pytest

from contentful_data import ContentfulConfig


@pytest.fixture
def config() -> ContentfulConfig:
    return ContentfulConfig.from_env()
