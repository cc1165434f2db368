"""
Authentication methods: request tokens, sessions and guest sessions.
"""

import logging

from ..api_url import PARAM_PASSWORD, PARAM_TOKEN, PARAM_USERNAME
from ..exceptions import MovieDbException, MovieDbExceptionType
from ..http_client import HttpMethod
from ..model import TokenAuthorisation, TokenSession
from .abstract_method import AbstractMethod

logger = logging.getLogger(__name__)

BASE_AUTH = "authentication/"


class TmdbAuthentication(AbstractMethod):
    """Class to hold the Authentication methods."""

    def get_authorisation_token(self) -> TokenAuthorisation:
        """
        Create a new request token. The user must approve it on the TMDb
        website (or via validate_with_login) before a session can be created.
        """
        api_url = self._api_url(BASE_AUTH, "token/new")
        return self._execute(HttpMethod.GET, api_url, TokenAuthorisation, action="get authorisation token")

    def get_session_token(self, token: TokenAuthorisation) -> TokenSession:
        """
        Create a session for an approved request token.

        Raises:
            MovieDbException: AUTHORISATION_FAILURE if the token was not successful
        """
        _require_successful(token)

        api_url = self._api_url(BASE_AUTH, "session/new").add_argument(PARAM_TOKEN, token.request_token)
        return self._execute(HttpMethod.GET, api_url, TokenSession, action="get session token")

    def get_session_token_login(self, token: TokenAuthorisation, username: str, password: str) -> TokenAuthorisation:
        """
        Approve a request token with the user's TMDb credentials.

        Raises:
            MovieDbException: AUTHORISATION_FAILURE if the token was not successful
        """
        _require_successful(token)

        api_url = self._api_url(BASE_AUTH, "token/validate_with_login")
        body = {
            PARAM_USERNAME: username,
            PARAM_PASSWORD: password,
            PARAM_TOKEN: token.request_token,
        }
        return self._execute(HttpMethod.POST, api_url, TokenAuthorisation, body=body, action="validate login")

    def get_guest_session_token(self) -> TokenSession:
        """Create a guest session, usable for rating without a user account."""
        api_url = self._api_url(BASE_AUTH, "guest_session/new")
        return self._execute(HttpMethod.GET, api_url, TokenSession, action="get guest session token")


def _require_successful(token: TokenAuthorisation) -> None:
    if not token.success:
        logger.warning("Session token was not successful!")
        raise MovieDbException(MovieDbExceptionType.AUTHORISATION_FAILURE, "Authorisation token was not successful!")
