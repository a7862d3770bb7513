"""Connection settings for the content client.

The content client resolves every request (``rest/api/...`` for JSON and
``download/attachments/...`` for attachment bytes) against one base URL, and
signs each one with basic auth. This module reads those three values from the
environment, after letting python-dotenv fill it from a .env file. Nothing
has a default.
"""

import logging
import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import InvalidCredentialsError

logger = logging.getLogger(__name__)

URL_VAR = 'CONFLUENCE_URL'
USER_VAR = 'CONFLUENCE_USER'
TOKEN_VAR = 'CONFLUENCE_API_TOKEN'


class Credentials(NamedTuple):
    """Base URL and basic-auth pair for one Confluence site."""
    url: str
    user: str
    api_token: str


class Authenticator:
    """Supplies the content client with its base URL and credentials.

    Environment:
        CONFLUENCE_URL: Site root that both the REST API and attachment
            downloads hang off, i.e. the /wiki path of a Cloud site
            (https://yourinstance.atlassian.net/wiki). A trailing slash is
            dropped.
        CONFLUENCE_USER: Account email used as the basic-auth user
        CONFLUENCE_API_TOKEN: API token used as the basic-auth password

    Example:
        >>> creds = Authenticator().get_credentials()
        >>> creds.url
        'https://yourinstance.atlassian.net/wiki'
    """

    def __init__(self):
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Read the connection settings.

        Returns:
            Credentials with the normalized base URL

        Raises:
            InvalidCredentialsError: If any variable is unset or empty; the
                error names the user and URL when known, never the token
        """
        url = (os.getenv(URL_VAR) or '').rstrip('/')
        user = os.getenv(USER_VAR) or ''
        api_token = os.getenv(TOKEN_VAR) or ''

        missing = [
            name for name, value in ((URL_VAR, url), (USER_VAR, user), (TOKEN_VAR, api_token))
            if not value
        ]
        if missing:
            logger.error(f"Missing connection settings: {', '.join(missing)}")
            raise InvalidCredentialsError(
                user=user or "unknown",
                endpoint=url or "unknown",
            )

        return Credentials(url=url, user=user, api_token=api_token)
