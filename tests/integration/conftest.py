from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from advisor.config.settings import Settings
from advisor.main import create_app


def _example_settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, llm_provider="example", **overrides)  # type: ignore[arg-type]


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """API client wired to the offline example provider."""
    with TestClient(create_app(_example_settings())) as test_client:
        yield test_client


@pytest.fixture()
def pdf_text_client() -> Iterator[TestClient]:
    """API client that reads PDF text layers locally before any vision call."""
    with TestClient(create_app(_example_settings(ocr_engine="pdf_text"))) as test_client:
        yield test_client
