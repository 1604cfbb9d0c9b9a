"""Shared pytest fixtures for gha-outdated tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gha_outdated.config import CheckerConfig

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_workflow():
    return (FIXTURES / "outdated.yml").read_text(encoding="utf-8")


@pytest.fixture
def make_config(tmp_path):
    def _make(**overrides):
        overrides.setdefault("base_dir", str(tmp_path))
        return CheckerConfig(**overrides)

    return _make


@pytest.fixture
def write_workflow(tmp_path):
    """Write a workflow file below tmp_path and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


def make_response(status_code=200, json_data=None, headers=None, json_error=None):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response
