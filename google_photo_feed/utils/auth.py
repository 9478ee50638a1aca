"""Authentication utilities for the Google Photo feed API."""

import logging
import os
from typing import cast

from google.auth.transport.requests import AuthorizedSession, Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from google_photo_feed.models import AuthenticationError

logger = logging.getLogger(__name__)

# If modifying these scopes, delete the file token.json.
SCOPES = ['https://picasaweb.google.com/data/']

def get_credentials(token_path: str, credentials_path: str) -> Credentials:
    """Get valid user credentials from storage.

    If there are no (valid) credentials available, let the user log in.

    Args:
        token_path: Path to token.json file
        credentials_path: Path to the OAuth client secret file

    Returns:
        Valid credentials object

    Raises:
        FileNotFoundError: If the client secret file is not found
    """
    creds = None
    if os.path.exists(token_path):
        creds = Credentials.from_authorized_user_file(token_path, SCOPES)

    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            logger.debug("Refreshing expired credentials from %s", token_path)
            creds.refresh(Request())
        else:
            if not os.path.exists(credentials_path):
                raise FileNotFoundError(
                    f"Missing credentials file at {credentials_path}"
                )

            flow = InstalledAppFlow.from_client_secrets_file(
                credentials_path,
                SCOPES
            )
            creds = flow.run_local_server(port=0)

        # Save the credentials for the next run
        with open(token_path, 'w', encoding='utf-8') as token:
            token.write(creds.to_json())

    return cast(Credentials, creds)

def authorized_session(token_path: str = 'token.json',
                       credentials_path: str = 'client_secret.json') -> AuthorizedSession:
    """Build an HTTP session that signs every request with the user's credentials.

    Args:
        token_path: Path to token.json file
        credentials_path: Path to the OAuth client secret file

    Returns:
        A requests session usable by FeedClient

    Raises:
        AuthenticationError: If credentials cannot be obtained
    """
    try:
        creds = get_credentials(token_path, credentials_path)
    except Exception as e:
        raise AuthenticationError(f"Error authenticating with Google Photo: {e}") from e
    return AuthorizedSession(creds)
