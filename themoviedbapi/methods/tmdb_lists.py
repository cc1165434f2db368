"""
List methods: read, create, modify and delete user lists.

Mutating calls require a session id from the authentication exchange.
"""

from typing import Optional, Union

from ..api_url import PARAM_ID, PARAM_MOVIE_ID, PARAM_SESSION
from ..http_client import HttpMethod
from ..model import ListItemStatus, MovieDbList, StatusCode, StatusCodeList
from .abstract_method import AbstractMethod

BASE_LIST = "list/"


class TmdbLists(AbstractMethod):
    """Class to hold the Lists methods."""

    def get_list(self, list_id: Union[str, int]) -> MovieDbList:
        """
        Get a list by its ID.

        Args:
            list_id: TMDb list ID

        Returns:
            The list and its items
        """
        api_url = self._api_url(BASE_LIST).add_argument(PARAM_ID, list_id)
        return self._execute(HttpMethod.GET, api_url, MovieDbList, action="get list")

    def is_movie_on_list(self, list_id: Union[str, int], movie_id: int) -> bool:
        """Check to see if a movie ID is already added to a list."""
        api_url = self._api_url(BASE_LIST, f"{list_id}/item_status").add_argument(PARAM_MOVIE_ID, movie_id)
        status = self._execute(HttpMethod.GET, api_url, ListItemStatus, action="process movie list")
        return status.item_present is True

    def create_list(self, session_id: str, name: Optional[str], description: Optional[str]) -> StatusCodeList:
        """
        Create a new list. A valid session id is required.

        Args:
            session_id: Session from the authentication exchange
            name: List name (surrounding whitespace is stripped)
            description: List description (surrounding whitespace is stripped)

        Returns:
            Status of the call, including the new list ID
        """
        api_url = self._api_url(BASE_LIST.rstrip("/")).add_argument(PARAM_SESSION, session_id)
        body = {
            "name": _trim_to_empty(name),
            "description": _trim_to_empty(description),
        }
        return self._execute(HttpMethod.POST, api_url, StatusCodeList, body=body, action="create list")

    def add_movie_to_list(self, session_id: str, list_id: Union[str, int], movie_id: int) -> StatusCode:
        """Add a movie to a list the session's user created."""
        return self._modify_movie_list(session_id, list_id, movie_id, "add_item")

    def remove_movie_from_list(self, session_id: str, list_id: Union[str, int], movie_id: int) -> StatusCode:
        """Remove a movie from a list the session's user created."""
        return self._modify_movie_list(session_id, list_id, movie_id, "remove_item")

    def _modify_movie_list(
        self, session_id: str, list_id: Union[str, int], movie_id: int, operation: str
    ) -> StatusCode:
        api_url = self._api_url(BASE_LIST, f"{list_id}/{operation}").add_argument(PARAM_SESSION, session_id)
        body = {"media_id": str(movie_id)}
        return self._execute(HttpMethod.POST, api_url, StatusCode, body=body, action="modify movie list")

    def delete_movie_list(self, session_id: str, list_id: Union[str, int]) -> StatusCode:
        """Delete a list the session's user created."""
        api_url = self._api_url(BASE_LIST, str(list_id)).add_argument(PARAM_SESSION, session_id)
        return self._execute(HttpMethod.DELETE, api_url, StatusCode, action="delete movie list")


def _trim_to_empty(value: Optional[str]) -> str:
    return value.strip() if value is not None else ""
