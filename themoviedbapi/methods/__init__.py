"""
Endpoint method groups, one class per TMDb API area.
"""

from .abstract_method import AbstractMethod
from .tmdb_authentication import TmdbAuthentication
from .tmdb_configuration import TmdbConfiguration
from .tmdb_lists import TmdbLists

__all__ = [
    "AbstractMethod",
    "TmdbAuthentication",
    "TmdbConfiguration",
    "TmdbLists",
]
