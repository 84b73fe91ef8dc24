"""
Shared pytest fixtures for the test suite.

The Cloud SDK boundary is always stubbed: operation tests hand a MagicMock in
place of ``storage.Client`` and assert on the calls it receives.
"""

import base64
import logging
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def storage_client():
    """A stand-in for google.cloud.storage.Client."""
    return MagicMock(name="storage_client")


@pytest.fixture
def bucket(storage_client):
    """The bucket handle returned by both client.bucket() and client.get_bucket()."""
    bucket = MagicMock(name="bucket")
    bucket.name = "my-bucket"
    storage_client.bucket.return_value = bucket
    storage_client.get_bucket.return_value = bucket
    return bucket


@pytest.fixture
def b64_key():
    return base64.b64encode(b"k" * 32).decode("utf-8")


@pytest.fixture
def other_b64_key():
    return base64.b64encode(b"n" * 32).decode("utf-8")


@pytest.fixture
def restore_root_logger():
    """Put back the root logger's handlers and level after a test reconfigures it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
