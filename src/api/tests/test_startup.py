"""Tests for application startup (lifespan) checks."""

import os
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from api.main import app
from api.dependencies import get_token_config


class TestStartupTokenConfig(unittest.TestCase):

    def setUp(self):
        get_token_config.cache_clear()

    def tearDown(self):
        get_token_config.cache_clear()

    @patch('api.main.get_mongodb_client', return_value=None)
    @patch.dict(os.environ, {}, clear=True)
    def test_missing_secret_prevents_startup(self, _mock_client):
        with self.assertRaises(ValueError):
            with TestClient(app):
                pass

    @patch('api.main.get_mongodb_client', return_value=None)
    @patch.dict(os.environ, {'JWT_SECRET': 'too-short'}, clear=True)
    def test_short_secret_prevents_startup(self, _mock_client):
        with self.assertRaises(ValueError):
            with TestClient(app):
                pass

    @patch('api.main.get_mongodb_client', return_value=None)
    @patch.dict(os.environ, {'JWT_SECRET': 's' * 32}, clear=True)
    def test_valid_secret_starts_and_validate_answers_false(self, _mock_client):
        with TestClient(app) as client:
            response = client.post("/api/auth/validate", json={"token": "x"})

        assert response.status_code == 200
        assert response.json() is False
