"""
pytest configuration for Helpful Tools.
Sets up import paths and provides a Flask test client for endpoint tests.
"""

import copy
import os
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.absolute()
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "src"))


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: marks tests that exercise the Flask endpoints"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests that work on very large inputs"
    )


@pytest.fixture(scope="session")
def flask_app():
    """The Flask application with testing enabled."""
    from main import app
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(flask_app):
    """Test client; tool configuration is restored after each test."""
    saved_config = copy.deepcopy(flask_app.config['TOOLS_CONFIG'])
    with flask_app.test_client() as test_client:
        yield test_client
    flask_app.config['TOOLS_CONFIG'] = saved_config


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point HELPFUL_TOOLS_CONFIG_DIR at a temporary directory."""
    monkeypatch.setenv('HELPFUL_TOOLS_CONFIG_DIR', str(tmp_path))
    return tmp_path
