"""
Configuration methods: API configuration and image URL construction.
"""

import logging

from ..exceptions import MovieDbException, MovieDbExceptionType
from ..http_client import HttpMethod
from ..model import Configuration
from .abstract_method import AbstractMethod

logger = logging.getLogger(__name__)

BASE_CONFIGURATION = "configuration"


class TmdbConfiguration(AbstractMethod):
    """Class to hold the Configuration methods."""

    def get_configuration(self) -> Configuration:
        """Get the image configuration and the valid change keys."""
        api_url = self._api_url(BASE_CONFIGURATION)
        return self._execute(HttpMethod.GET, api_url, Configuration, action="read configuration")

    @staticmethod
    def create_image_url(configuration: Configuration, image_path: str, required_size: str) -> str:
        """
        Generate the full image URL for an image path.

        Args:
            configuration: Configuration returned by get_configuration
            image_path: Path as returned by TMDb, e.g. "/abc.jpg"
            required_size: One of the configured sizes, e.g. "w500" or "original"

        Returns:
            Absolute image URL, on secure_base_url when base_url is missing

        Raises:
            MovieDbException: INVALID_IMAGE if the size is not offered by TMDb
                or the configuration has no image base URL
        """
        images = configuration.images
        if not images.is_valid_size(required_size):
            logger.warning(f"Invalid image size requested: {required_size}")
            raise MovieDbException(MovieDbExceptionType.INVALID_IMAGE, required_size)

        base_url = images.base_url or images.secure_base_url
        if not base_url:
            logger.warning("Configuration has no image base URL")
            raise MovieDbException(MovieDbExceptionType.INVALID_IMAGE, image_path)

        return f"{base_url}{required_size}{image_path}"
