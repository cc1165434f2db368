"""
TheMovieDB API client facade.

TheMovieDbApi owns one transport and one mapper and exposes every endpoint
method. It keeps no per-call state, so one instance can be shared between
threads as long as the supplied requests.Session can.
"""

import logging
from typing import Optional, Union

import requests

from .config import ClientConfig, load_config
from .exceptions import MovieDbException, MovieDbExceptionType
from .http_client import HttpTransport
from .mapper import ResponseMapper
from .methods import TmdbAuthentication, TmdbConfiguration, TmdbLists
from .model import (
    Configuration,
    MovieDbList,
    StatusCode,
    StatusCodeList,
    TokenAuthorisation,
    TokenSession,
)


class TheMovieDbApi:
    """Client for the TheMovieDB v3 API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: TMDb API key (falls back to config.api_key)
            session: HTTP session used for every request; owned by the caller
            config: Client settings (defaults to ClientConfig())
            logger: Logger for unknown-field warnings from the response mapper
        """
        self.config = config or ClientConfig()
        self.api_key = api_key or self.config.api_key
        if not self.api_key:
            raise MovieDbException(
                MovieDbExceptionType.AUTHORISATION_FAILURE,
                "TMDb API key required. Set TMDB_API_KEY environment variable or pass api_key parameter.",
            )

        self.transport = HttpTransport(session=session, timeout=self.config.timeout)
        self.mapper = ResponseMapper(logger=logger)

        shared = dict(transport=self.transport, mapper=self.mapper, base_url=self.config.base_url)
        self.tmdb_configuration = TmdbConfiguration(self.api_key, **shared)
        self.tmdb_auth = TmdbAuthentication(self.api_key, **shared)
        self.tmdb_lists = TmdbLists(self.api_key, **shared)

        logging.getLogger(__name__).debug(f"TMDb client initialized for {self.config.base_url}")

    @classmethod
    def from_env(cls, config_path: Optional[str] = None, **kwargs) -> "TheMovieDbApi":
        """Create a client from environment variables, .env and an optional YAML file."""
        return cls(config=load_config(config_path), **kwargs)

    # ---- Configuration ----

    def get_configuration(self) -> Configuration:
        return self.tmdb_configuration.get_configuration()

    def create_image_url(self, configuration: Configuration, image_path: str, required_size: str) -> str:
        return self.tmdb_configuration.create_image_url(configuration, image_path, required_size)

    # ---- Authentication ----

    def get_authorisation_token(self) -> TokenAuthorisation:
        return self.tmdb_auth.get_authorisation_token()

    def get_session_token(self, token: TokenAuthorisation) -> TokenSession:
        return self.tmdb_auth.get_session_token(token)

    def get_session_token_login(self, token: TokenAuthorisation, username: str, password: str) -> TokenAuthorisation:
        return self.tmdb_auth.get_session_token_login(token, username, password)

    def get_guest_session_token(self) -> TokenSession:
        return self.tmdb_auth.get_guest_session_token()

    # ---- Lists ----

    def get_list(self, list_id: Union[str, int]) -> MovieDbList:
        return self.tmdb_lists.get_list(list_id)

    def is_movie_on_list(self, list_id: Union[str, int], movie_id: int) -> bool:
        return self.tmdb_lists.is_movie_on_list(list_id, movie_id)

    def create_list(self, session_id: str, name: Optional[str], description: Optional[str]) -> StatusCodeList:
        return self.tmdb_lists.create_list(session_id, name, description)

    def add_movie_to_list(self, session_id: str, list_id: Union[str, int], movie_id: int) -> StatusCode:
        return self.tmdb_lists.add_movie_to_list(session_id, list_id, movie_id)

    def remove_movie_from_list(self, session_id: str, list_id: Union[str, int], movie_id: int) -> StatusCode:
        return self.tmdb_lists.remove_movie_from_list(session_id, list_id, movie_id)

    def delete_movie_list(self, session_id: str, list_id: Union[str, int]) -> StatusCode:
        return self.tmdb_lists.delete_movie_list(session_id, list_id)


if __name__ == "__main__":
    # Example usage
    from .config import setup_logging

    client_config = load_config()
    setup_logging(client_config)

    try:
        client = TheMovieDbApi(config=client_config)

        configuration = client.get_configuration()
        print(f"Image base URL: {configuration.images.base_url}")
        print(f"Poster sizes: {', '.join(configuration.images.poster_sizes)}")
        print(f"Change keys: {len(configuration.change_keys)}")

        movie_list = client.get_list("509ec17b19c2950a0600050d")
        print(f"List: {movie_list.name} ({movie_list.item_count} items)")

    except MovieDbException as e:
        print(f"TMDb Error: {e}")
