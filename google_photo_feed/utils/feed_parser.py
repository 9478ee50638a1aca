"""Decoding of Google Photo Atom feeds into albums and photos."""

import logging
from datetime import datetime
from typing import Callable, Iterator, List, Optional, TypeVar
from xml.etree import ElementTree as ET

from google_photo_feed.models import Album, FeedDecodeError, Photo

logger = logging.getLogger(__name__)

ATOM_NS = "http://www.w3.org/2005/Atom"
GPHOTO_NS = "http://schemas.google.com/photos/2007"
EXIF_NS = "http://schemas.google.com/photos/exif/2007"

T = TypeVar("T")


def _qname(namespace: str, name: str) -> str:
    return f"{{{namespace}}}{name}"


def _local_name(tag: str) -> str:
    """Strip the namespace part of an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


def _child_by_local_name(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _text(element: Optional[ET.Element]) -> str:
    if element is None or element.text is None:
        return ""
    return element.text.strip()


def _int(element: Optional[ET.Element], field_name: str) -> int:
    text = _text(element)
    if not text:
        return 0
    try:
        return int(text)
    except ValueError as e:
        raise FeedDecodeError(f"Invalid integer value for {field_name}: {text!r}") from e


def _datetime(element: Optional[ET.Element], field_name: str) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp such as 2012-03-04T05:06:07.000Z."""
    text = _text(element)
    if not text:
        return None
    if text[-1] in "Zz":
        text = text[:-1] + "+00:00"
    try:
        value = datetime.fromisoformat(text)
    except ValueError as e:
        raise FeedDecodeError(f"Invalid timestamp for {field_name}: {text!r}") from e
    if value.tzinfo is None:
        raise FeedDecodeError(f"Timestamp for {field_name} has no UTC offset: {text!r}")
    return value


def _entries(data: bytes) -> Iterator[ET.Element]:
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise FeedDecodeError(f"Invalid XML feed: {e}") from e

    if root.tag != _qname(ATOM_NS, "feed"):
        raise FeedDecodeError(f"Unexpected feed root element: {root.tag}")

    return (child for child in root if _local_name(child.tag) == "entry")


def parse_album_entry(entry: ET.Element) -> Album:
    """Decode one album feed entry."""
    return Album(
        id=_text(entry.find(_qname(GPHOTO_NS, "id"))),
        name=_text(_child_by_local_name(entry, "title")),
        num_photos=_int(entry.find(_qname(GPHOTO_NS, "numphotos")), "numphotos"),
    )


def parse_photo_entry(entry: ET.Element) -> Photo:
    """Decode one photo feed entry."""
    exif_id = None
    tags = _child_by_local_name(entry, "tags")
    if tags is not None:
        unique_id = tags.find(_qname(EXIF_NS, "imageUniqueID"))
        if unique_id is not None:
            exif_id = _text(unique_id)

    content = entry.find(_qname(ATOM_NS, "content"))
    content_url = content.get("src", "") if content is not None else ""

    return Photo(
        id=_text(entry.find(_qname(GPHOTO_NS, "id"))),
        exif_id=exif_id,
        url=_text(entry.find(_qname(ATOM_NS, "id"))),
        content_url=content_url,
        name=_text(_child_by_local_name(entry, "title")),
        timestamp=_int(entry.find(_qname(GPHOTO_NS, "timestamp")), "timestamp"),
        size=_int(entry.find(_qname(GPHOTO_NS, "size")), "size"),
        published=_datetime(entry.find(_qname(ATOM_NS, "published")), "published"),
        updated=_datetime(entry.find(_qname(ATOM_NS, "updated")), "updated"),
    )


def _parse_feed(data: bytes, parse_entry: Callable[[ET.Element], T]) -> List[T]:
    # Built in full before returning so a bad entry discards the whole page
    items = [parse_entry(entry) for entry in _entries(data)]
    logger.debug("Decoded %d entries", len(items))
    return items


def parse_album_feed(data: bytes) -> List[Album]:
    """Decode an album listing feed.

    Args:
        data: Raw XML body of the user feed

    Returns:
        List of albums, in feed order

    Raises:
        FeedDecodeError: If the document is malformed
    """
    return _parse_feed(data, parse_album_entry)


def parse_photo_feed(data: bytes) -> List[Photo]:
    """Decode one page of an album's photo feed.

    Args:
        data: Raw XML body of the album feed page

    Returns:
        List of photos, in feed order

    Raises:
        FeedDecodeError: If the document is malformed
    """
    return _parse_feed(data, parse_photo_entry)
