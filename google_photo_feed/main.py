"""Command line entry point for the Google Photo feed client."""

import argparse
import logging
import sys
from typing import List, Optional

from tabulate import tabulate

from google_photo_feed.client import FeedClient
from google_photo_feed.models import Album, GooglePhotoFeedError
from google_photo_feed.utils.auth import authorized_session

logger = logging.getLogger(__name__)


class AlbumBrowser:
    """Lists the albums and photos of the authenticated user."""

    def __init__(self, token_path: str = "token.json", credentials_path: str = "client_secret.json"):
        """Initialize the browser."""
        self.token_path = token_path
        self.credentials_path = credentials_path
        self.client: Optional[FeedClient] = None

    def authenticate(self) -> None:
        """Authenticate with the Google Photo feed API."""
        try:
            session = authorized_session(self.token_path, self.credentials_path)
        except GooglePhotoFeedError as e:
            logger.error("Authentication failed: %s", str(e))
            raise
        self.client = FeedClient(session)

    def find_album(self, albums: List[Album], key: str) -> Optional[Album]:
        """Find an album by id, falling back to an exact title match."""
        for album in albums:
            if album.id == key:
                return album
        for album in albums:
            if album.name == key:
                return album
        return None

    def print_albums(self) -> None:
        """Print the user's albums."""
        albums = self.client.list_albums()
        if not albums:
            print("No albums found")
            return

        rows = [[album.id, album.name, album.num_photos] for album in albums]
        print(tabulate(rows, headers=["ID", "Title", "Declared Photos"], tablefmt="psql"))
        print(f"\nTotal albums: {len(albums)}")

    def print_album_photos(self, key: str) -> bool:
        """Print every photo of the album whose id or title is key.

        Returns:
            False if no such album exists
        """
        album = self.find_album(self.client.list_albums(), key)
        if album is None:
            print(f"No album found matching: {key}")
            return False

        photos = self.client.list_photos(album)
        rows = [
            [
                photo.id,
                photo.name,
                photo.size,
                photo.published.isoformat() if photo.published else "",
            ]
            for photo in photos
        ]
        if rows:
            print(f"\nAlbum: {album.name}")
            print(tabulate(rows, headers=["ID", "Title", "Size", "Published"], tablefmt="psql"))
        print(f"\nTotal photos retrieved: {len(photos)} (declared: {album.num_photos})")
        return True


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Google Photo Feed")

    # Global arguments
    parser.add_argument("--token-path", type=str, default="token.json", help="OAuth token file")
    parser.add_argument(
        "--credentials-path",
        type=str,
        default="client_secret.json",
        help="OAuth client secret file",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands", required=True)

    subparsers.add_parser("albums", help="List albums")

    photos_parser = subparsers.add_parser("photos", help="List the photos of an album")
    photos_parser.add_argument("album", type=str, help="Album id or title")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the Google Photo feed CLI."""
    args = parse_arguments(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    browser = AlbumBrowser(token_path=args.token_path, credentials_path=args.credentials_path)
    try:
        browser.authenticate()
        if args.command == "albums":
            browser.print_albums()
        elif args.command == "photos":
            if not browser.print_album_photos(args.album):
                sys.exit(1)
    except GooglePhotoFeedError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
