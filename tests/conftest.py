"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_config_json():
    """Sample nested configuration document."""
    return {
        "db": {
            "host": "localhost",
            "port": 5432
        },
        "tags": ["a", "b"]
    }


@pytest.fixture
def sample_service_json():
    """Sample service configuration with every JSON value kind."""
    return {
        "service": {
            "name": "billing",
            "debug": False,
            "replicas": 3,
            "ratio": 0.25,
            "owner": None,
            "hosts": ["alpha", "beta"],
            "limits": {
                "cpu": "500m",
                "memory": "1Gi"
            }
        },
        "features": [],
        "empty": {}
    }


@pytest.fixture
def sample_json_file(temp_dir, sample_config_json):
    """Write the sample configuration document to a file."""
    path = temp_dir / "config.json"
    path.write_text(json.dumps(sample_config_json), encoding="utf-8")
    return path
