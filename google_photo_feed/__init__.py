"""Client for the Google Photo (Picasa Web Albums) feed API."""

from google_photo_feed.client import FeedClient
from google_photo_feed.models import (
    Album,
    AuthenticationError,
    BodyReadError,
    FeedDecodeError,
    FeedFetchError,
    GooglePhotoFeedError,
    Photo,
    RequestConstructionError,
    TransportError,
)

__all__ = [
    "Album",
    "AuthenticationError",
    "BodyReadError",
    "FeedClient",
    "FeedDecodeError",
    "FeedFetchError",
    "GooglePhotoFeedError",
    "Photo",
    "RequestConstructionError",
    "TransportError",
]
