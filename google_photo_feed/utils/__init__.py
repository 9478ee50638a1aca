"""Utility functions for the Google Photo feed client."""

from .auth import authorized_session, get_credentials
from .feed_parser import parse_album_feed, parse_photo_feed

__all__ = ["authorized_session", "get_credentials", "parse_album_feed", "parse_photo_feed"]
