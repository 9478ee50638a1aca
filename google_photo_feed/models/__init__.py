"""Models for the Google Photo feed client."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

ALBUM_FEED_BASE_URL = "https://picasaweb.google.com/data/feed/api/user/default/albumid/"


@dataclass(frozen=True)
class Album:
    """Top level object of the Google Photo (Picasa) API.

    An album is essentially a list of photos with some accompanying metadata.
    """

    id: str
    name: str
    # Sometimes higher than the number of photos list_photos can retrieve
    num_photos: int

    @property
    def feed_url(self) -> str:
        """Return the URL of the Atom feed for this album."""
        return ALBUM_FEED_BASE_URL + self.id


@dataclass(frozen=True)
class Photo:
    """Metadata Google Photo stores about one of the user's photos."""

    id: str
    exif_id: Optional[str]
    url: str
    content_url: str
    name: str
    timestamp: int
    size: int
    published: Optional[datetime]
    updated: Optional[datetime]


class GooglePhotoFeedError(Exception):
    """Base exception for Google Photo feed operations."""


class AuthenticationError(GooglePhotoFeedError):
    """Raised when authentication fails."""


class FeedFetchError(GooglePhotoFeedError):
    """Raised when a feed could not be fetched."""


class RequestConstructionError(FeedFetchError):
    """Raised when the request cannot be built, e.g. a malformed URL."""


class TransportError(FeedFetchError):
    """Raised on connection, DNS, TLS or HTTP status failures."""


class BodyReadError(FeedFetchError):
    """Raised when the response body stream is interrupted."""


class FeedDecodeError(GooglePhotoFeedError):
    """Raised when a feed document is malformed or has an unexpected shape."""
