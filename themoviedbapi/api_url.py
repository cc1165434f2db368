"""
URL construction for TheMovieDB API requests.

An ApiUrl collects the endpoint path pieces and query arguments for a single
request. It is built per call and never shared between requests.
"""

from typing import Any, Dict, List, Tuple
from urllib.parse import urlencode

TMDB_API_BASE = "https://api.themoviedb.org/3/"

# Common argument names
PARAM_API_KEY = "api_key"
PARAM_ID = "id"
PARAM_SESSION = "session_id"
PARAM_TOKEN = "request_token"
PARAM_USERNAME = "username"
PARAM_PASSWORD = "password"
PARAM_MOVIE_ID = "movie_id"


class ApiUrl:
    """Builder for a fully qualified TMDb request URL."""

    def __init__(self, api_key: str, method: str, submethod: str = "", base_url: str = TMDB_API_BASE):
        """
        Args:
            api_key: TMDb API key, always sent as the first query argument
            method: Base path segment, e.g. "list/" or "configuration"
            submethod: Optional suffix appended after the id, e.g. "42/item_status"
            base_url: Root of the API
        """
        self.api_key = api_key
        self.method = method
        self.submethod = submethod or ""
        self.base_url = base_url
        self.arguments: Dict[str, str] = {}

    def add_argument(self, name: str, value: Any) -> "ApiUrl":
        """Add a query (or id) argument. None is sent as an empty string."""
        self.arguments[name] = "" if value is None else str(value)
        return self

    def build_url(self) -> str:
        """Assemble the absolute URL with an encoded query string."""
        arguments = dict(self.arguments)

        path = self.base_url + self.method
        if PARAM_ID in arguments:
            path = _join_path(path, arguments.pop(PARAM_ID))
        if self.submethod:
            path = _join_path(path, self.submethod)

        query: List[Tuple[str, str]] = [(PARAM_API_KEY, "" if self.api_key is None else str(self.api_key))]
        query.extend(arguments.items())

        return f"{path}?{urlencode(query)}"

    def __repr__(self) -> str:
        return f"ApiUrl(method={self.method!r}, submethod={self.submethod!r}, arguments={sorted(self.arguments)})"


def _join_path(left: str, right: str) -> str:
    if not right:
        return left
    if not left:
        return right
    return left.rstrip("/") + "/" + right.lstrip("/")
