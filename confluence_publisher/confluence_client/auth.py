"""Authentication module for loading Confluence credentials.

Credentials come from environment variables, optionally seeded from a .env
file with python-dotenv. Proxy settings are left to requests, which honours
the standard HTTP_PROXY / HTTPS_PROXY variables.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import InvalidCredentialsError

_FALSY = {'false', '0', 'no', 'off'}


class Credentials(NamedTuple):
    """Confluence API credentials and transport settings."""
    url: str
    user: str
    api_token: str
    verify_ssl: bool = True


class Authenticator:
    """Loads and validates Confluence credentials from environment variables.

    Required environment variables:
        CONFLUENCE_URL: Confluence root URL (e.g., https://yourinstance.atlassian.net/wiki)
        CONFLUENCE_USER: Confluence user email address
        CONFLUENCE_API_TOKEN: Confluence API token

    Optional:
        CONFLUENCE_VERIFY_SSL: set to "false" to disable TLS certificate checks

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Publishing to {creds.url}")
    """

    def __init__(self, env_file: str = None):
        """Load environment variables from a .env file.

        Args:
            env_file: Explicit .env path. If None, python-dotenv searches
                      upwards from the working directory.
        """
        load_dotenv(dotenv_path=env_file)

    def get_credentials(self) -> Credentials:
        """Get Confluence credentials from environment variables.

        Returns:
            Credentials: url, user, api_token and verify_ssl

        Raises:
            InvalidCredentialsError: If any required credential is missing
        """
        url = os.getenv('CONFLUENCE_URL')
        user = os.getenv('CONFLUENCE_USER')
        api_token = os.getenv('CONFLUENCE_API_TOKEN')

        missing = []
        if not url:
            missing.append('CONFLUENCE_URL')
        if not user:
            missing.append('CONFLUENCE_USER')
        if not api_token:
            missing.append('CONFLUENCE_API_TOKEN')

        if missing:
            raise InvalidCredentialsError(
                user=user if user else "unknown",
                endpoint=url if url else "unknown",
                missing=missing,
            )

        verify_ssl = os.getenv('CONFLUENCE_VERIFY_SSL', 'true').strip().lower() not in _FALSY

        return Credentials(
            url=url.rstrip('/'),  # type: ignore[union-attr]
            user=user,  # type: ignore[arg-type]
            api_token=api_token,  # type: ignore[arg-type]
            verify_ssl=verify_ssl,
        )
