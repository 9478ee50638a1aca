"""Client for the Google Photo (Picasa) feed API."""

import logging
from typing import List, Optional, Union

import requests
from requests.exceptions import (
    ChunkedEncodingError,
    ConnectionError as RequestsConnectionError,
    ContentDecodingError,
    InvalidSchema,
    InvalidURL,
    MissingSchema,
    RequestException,
    URLRequired,
)

from google_photo_feed.models import (
    Album,
    BodyReadError,
    Photo,
    RequestConstructionError,
    TransportError,
)
from google_photo_feed.utils.feed_parser import parse_album_feed, parse_photo_feed

logger = logging.getLogger(__name__)

USER_FEED_URL = "https://picasaweb.google.com/data/feed/api/user/default"
GDATA_VERSION = "2"
PAGE_SIZE_STEP = 1000


class FeedClient:
    """Reads albums and photos from the authenticated user's Google Photo feeds."""

    def __init__(
        self,
        session: requests.Session,
        timeout: Optional[Union[float, tuple]] = None,
    ):
        """Initialize the client.

        Args:
            session: An already authorized session, see utils.auth.authorized_session
            timeout: Optional requests timeout applied to every fetch
        """
        self.session = session
        self.timeout = timeout

    def get_feed(self, endpoint: str) -> bytes:
        """Fetch a feed document and return its raw body.

        Args:
            endpoint: Absolute feed URL, query string included

        Returns:
            The complete response body

        Raises:
            RequestConstructionError: If the endpoint is not a valid URL
            TransportError: On network failures or an HTTP error status
            BodyReadError: If the body stream is interrupted
        """
        logger.info("GET %s", endpoint)
        try:
            response = self.session.get(
                endpoint,
                headers={"GData-Version": GDATA_VERSION},
                stream=True,
                timeout=self.timeout,
            )
        except (MissingSchema, InvalidSchema, InvalidURL, URLRequired) as e:
            raise RequestConstructionError(f"Invalid feed URL {endpoint!r}: {e}") from e
        except RequestException as e:
            raise TransportError(f"Request to {endpoint} failed: {e}") from e

        with response:
            try:
                response.raise_for_status()
            except RequestException as e:
                raise TransportError(f"Request to {endpoint} failed: {e}") from e

            try:
                return response.content
            except (ChunkedEncodingError, ContentDecodingError, RequestsConnectionError) as e:
                raise BodyReadError(f"Reading response from {endpoint} failed: {e}") from e

    def list_albums(self) -> List[Album]:
        """Return the authenticated user's albums.

        Only the first page of the user feed is read.
        """
        data = self.get_feed(USER_FEED_URL)
        return parse_album_feed(data)

    def list_photos(self, album: Album) -> List[Photo]:
        """Return every photo retrievable from an album.

        Pages are requested until one adds nothing. album.num_photos is not a
        reliable bound: the feed sometimes serves fewer photos than it declares.
        """
        photos: List[Photo] = []

        start, end = 1, PAGE_SIZE_STEP
        previous_len = -1
        while previous_len != len(photos):
            previous_len = len(photos)

            page = self._list_photos_page(album, start, end)
            photos.extend(page)

            start, end = end, end + PAGE_SIZE_STEP

        logger.debug(
            "Album %s: %d photos retrieved, %d declared", album.id, len(photos), album.num_photos
        )
        return photos

    def _list_photos_page(self, album: Album, start: int, end: int) -> List[Photo]:
        url = f"{album.feed_url}?start-index={start}&max-results={end}"
        data = self.get_feed(url)
        return parse_photo_feed(data)
