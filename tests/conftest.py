"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from kcet_predictor import utils
from kcet_predictor.main import app


@pytest.fixture(autouse=True)
def clear_college_cache():
    """Drop the cached college list around every test."""
    utils.reset_cache()
    yield
    utils.reset_cache()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def college_csv(tmp_path, monkeypatch):
    """Point the data directory at a small college list."""
    (tmp_path / "kcet_colleges.csv").write_text(
        "code,name\n"
        "e101,E:   Alpha   Institute of Technology :\n"
        "E102,Beta College of Engineering\n"
    )
    monkeypatch.setenv("KCET_DATA_DIR", str(tmp_path))
    return tmp_path
