"""
Integration tests for TheMovieDbApi against the real TMDB API.

These tests require a valid TMDB API key and internet connection.
They exercise only read-only endpoints.

Note: These tests are skipped in environments without TMDB_API_KEY.
"""

import os
import unittest

import pytest

from themoviedbapi import TheMovieDbApi
from themoviedbapi.exceptions import MovieDbException, MovieDbExceptionType


@pytest.mark.integration
class TestTMDBIntegration(unittest.TestCase):
    """Integration tests requiring real TMDB API access."""

    @classmethod
    def setUpClass(cls):
        """Set up integration test class."""
        cls.api_key = os.getenv('TMDB_API_KEY')
        if not cls.api_key:
            raise unittest.SkipTest("TMDB_API_KEY environment variable not set")

        cls.client = TheMovieDbApi(api_key=cls.api_key)

    def test_get_configuration_real_api(self):
        """Test fetching the real API configuration."""
        config = self.client.get_configuration()

        self.assertTrue(config.images.secure_base_url.startswith('https://'))
        self.assertIn('original', config.images.poster_sizes)
        self.assertGreater(len(config.change_keys), 0)

    def test_get_list_real_api(self):
        """Test fetching a public list."""
        movie_list = self.client.get_list('509ec17b19c2950a0600050d')

        self.assertTrue(movie_list.name)
        self.assertGreater(len(movie_list.items), 0)

    def test_invalid_api_key(self):
        """Test that an invalid key surfaces as HTTP_ERROR."""
        client = TheMovieDbApi(api_key='invalid_key')

        with self.assertRaises(MovieDbException) as ctx:
            client.get_configuration()

        self.assertEqual(ctx.exception.exception_type, MovieDbExceptionType.HTTP_ERROR)
        self.assertEqual(ctx.exception.status_code, 401)
