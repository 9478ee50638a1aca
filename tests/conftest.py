"""Test configuration for pytest."""

import sys
from pathlib import Path
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

# Add the project root directory to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

FEED_HEADER = (
    "<?xml version='1.0' encoding='UTF-8'?>"
    "<feed xmlns='http://www.w3.org/2005/Atom'"
    " xmlns:openSearch='http://a9.com/-/spec/opensearch/1.1/'"
    " xmlns:gphoto='http://schemas.google.com/photos/2007'"
    " xmlns:media='http://search.yahoo.com/mrss/'"
    " xmlns:exif='http://schemas.google.com/photos/exif/2007'"
    " xmlns:gd='http://schemas.google.com/g/2005'>"
    "<id>https://picasaweb.google.com/data/feed/user/default</id>"
    "<title type='text'>feed title</title>"
)
FEED_FOOTER = "</feed>"


def album_entry(album_id: str, title: str, num_photos: int) -> str:
    return (
        "<entry>"
        f"<id>https://picasaweb.google.com/data/entry/user/default/albumid/{album_id}</id>"
        f"<title type='text'>{title}</title>"
        f"<gphoto:id>{album_id}</gphoto:id>"
        f"<gphoto:numphotos>{num_photos}</gphoto:numphotos>"
        "</entry>"
    )


def photo_entry(photo_id: str, exif_id: Optional[str] = None) -> str:
    tags = ""
    if exif_id is not None:
        tags = f"<exif:tags><exif:imageUniqueID>{exif_id}</exif:imageUniqueID></exif:tags>"
    return (
        "<entry>"
        f"<id>https://picasaweb.google.com/data/entry/user/default/albumid/1/photoid/{photo_id}</id>"
        "<published>2012-03-04T05:06:07.000Z</published>"
        "<updated>2013-04-05T06:07:08.000Z</updated>"
        f"<title type='text'>IMG_{photo_id}.jpg</title>"
        f"<content type='image/jpeg' src='https://lh3.googleusercontent.com/{photo_id}.jpg'/>"
        f"<gphoto:id>{photo_id}</gphoto:id>"
        "<gphoto:timestamp>1330837567000</gphoto:timestamp>"
        "<gphoto:size>2048</gphoto:size>"
        f"{tags}"
        "</entry>"
    )


@pytest.fixture
def album_feed_xml() -> bytes:
    """A user feed with two albums."""
    entries = album_entry("5001", "Holidays", 3) + album_entry("5002", "Family", 0)
    return (FEED_HEADER + entries + FEED_FOOTER).encode("utf-8")


@pytest.fixture
def make_photo_feed() -> Callable[..., bytes]:
    """Build a photo feed page holding `count` photos numbered from `first`."""

    def _make(count: int, first: int = 1) -> bytes:
        entries = "".join(photo_entry(str(n)) for n in range(first, first + count))
        return (FEED_HEADER + entries + FEED_FOOTER).encode("utf-8")

    return _make


@pytest.fixture
def make_response() -> Callable[[bytes], MagicMock]:
    """Build a requests.Response stand-in serving the given body."""

    def _make(body: bytes) -> MagicMock:
        response = MagicMock()
        response.status_code = 200
        response.content = body
        return response

    return _make


@pytest.fixture
def make_feed() -> Callable[[str], bytes]:
    """Wrap raw entry markup into a complete feed document."""

    def _make(entries: str) -> bytes:
        return (FEED_HEADER + entries + FEED_FOOTER).encode("utf-8")

    return _make


@pytest.fixture
def make_photo_entry() -> Callable[..., str]:
    """Expose the photo entry builder to tests."""
    return photo_entry
