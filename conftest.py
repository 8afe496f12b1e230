import json

import pytest

from retag.test.mocks.mock_classes import MockCompletedProcess


@pytest.fixture
def raise_():
    def raise_exception(e):
        raise e

    return raise_exception


@pytest.fixture(scope="module")
def mock_subprocess_results():
    def mock0(*args, **kwargs):
        return MockCompletedProcess(returncode=0, stdout="successful")

    def mock_empty(*args, **kwargs):
        return MockCompletedProcess(returncode=0, stdout="")

    return {
        "0": mock0,
        "empty": mock_empty,
    }


@pytest.fixture
def sample_config():
    return {
        "repositories": [
            {
                "name": "dockerhub",
                "additionalNames": ["hub", "docker.io"],
                "registry": "docker.io",
                "suffix": "library",
            },
            {
                "name": "internal",
                "additionalNames": ["int"],
                "registry": "registry.internal:5000",
                "suffix": "mirror",
                "destinationMappings": {"library/": "official/"},
            },
            {
                "name": "quay",
                "registry": "quay.io",
            },
        ],
        "destinationMappings": {"/bitnami/": "/vendor/bitnami/"},
    }


@pytest.fixture
def config_file(tmp_path, sample_config):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(sample_config), encoding="utf-8")
    return path
