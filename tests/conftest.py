"""Pytest configuration and shared fixtures."""

import logging

import pytest

from src.common.io import NullIO
from src.common.logger import LOGGER_ROOT
from src.repos.array import ArrayRepository, WritableArrayRepository
from src.repos.base import Package
from src.repos.manager import RepositoryManager


@pytest.fixture
def sample_config():
    """Sample configuration dictionary."""
    return {
        "repositories": [
            {
                "type": "package",
                "name": "inline",
                "package": {"name": "acme/foo", "version": "1.0.0"},
            },
        ],
        "logging": {
            "level": "INFO",
            "log_dir": "/tmp/repository-manager/logs",
        },
    }


@pytest.fixture
def null_io():
    """I/O sink that discards output."""
    return NullIO()


@pytest.fixture
def manager(null_io):
    """Repository manager without optional collaborators."""
    return RepositoryManager(null_io, {"cache_dir": "/tmp/cache"})


@pytest.fixture
def foo_v1():
    return Package(name="acme/foo", version="1.0.0")


@pytest.fixture
def foo_v2():
    return Package(name="acme/foo", version="2.0.0")


@pytest.fixture
def bar_v1():
    return Package(name="acme/bar", version="1.0.0")


@pytest.fixture
def array_repository(foo_v1, foo_v2, bar_v1):
    """Read-only repository with two foo versions and one bar."""
    return ArrayRepository([foo_v1, foo_v2, bar_v1])


@pytest.fixture
def local_repository():
    """Empty writable repository."""
    return WritableArrayRepository()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers and level set on the package logger during a test."""
    yield
    root = logging.getLogger(LOGGER_ROOT)
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
