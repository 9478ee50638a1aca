"""Configuration for unit tests."""

import logging
from unittest.mock import MagicMock

import pytest
import requests

from google_photo_feed.client import FeedClient


@pytest.fixture(autouse=True)
def setup_logging():
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)
    logging.getLogger("google_photo_feed").setLevel(logging.DEBUG)
    yield


@pytest.fixture
def session():
    """An authorized session stand-in; no request ever leaves the process."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    """A FeedClient wired to the fake session."""
    return FeedClient(session)
