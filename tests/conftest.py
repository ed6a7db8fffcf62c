"""
Pytest configuration and shared fixtures
"""

import pytest
from pathlib import Path
from unittest.mock import Mock

from mcpskill.core.config import InstallerConfig


@pytest.fixture
def temp_binary_dir(tmp_path):
    """Temporary binary directory for testing"""
    binary_dir = tmp_path / "bin" / "native"
    binary_dir.mkdir(parents=True)
    return binary_dir


@pytest.fixture
def test_config(temp_binary_dir):
    """Linux/amd64 configuration with a temporary binary directory"""
    return InstallerConfig(
        repo="example/mcp-skill-cli",
        version="1.2.3",
        platform="linux",
        arch="amd64",
        bin_dir=temp_binary_dir,
        show_progress=False,
    )


@pytest.fixture
def windows_config(temp_binary_dir):
    """Windows/amd64 configuration with a temporary binary directory"""
    return InstallerConfig(
        repo="example/mcp-skill-cli",
        version="1.2.3",
        platform="windows",
        arch="amd64",
        bin_dir=temp_binary_dir,
        show_progress=False,
    )


def make_response(status_code=200, body=b"", headers=None):
    """Mock requests.Response with just what the installer touches"""
    response = Mock()
    response.status_code = status_code
    response.headers = dict(headers or {})
    response.iter_content.return_value = [body] if body else []
    return response


@pytest.fixture
def response_factory():
    """Factory for mock responses"""
    return make_response


@pytest.fixture
def mock_session():
    """Mock requests.Session; set .get.side_effect to a list of responses"""
    return Mock()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment toggles out of the tests"""
    monkeypatch.delenv("MCP_SKIP_DOWNLOAD", raising=False)
    monkeypatch.delenv("MCP_SKILL_RELEASE_REPO", raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration between tests"""
    import logging

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith('mcpskill'):
            logger = logging.getLogger(name)
            logger.setLevel(logging.NOTSET)

    yield

    logging.getLogger('mcpskill').setLevel(logging.INFO)
