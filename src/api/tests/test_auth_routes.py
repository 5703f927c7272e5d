"""Tests for authentication API routes."""

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from api.main import app
from api.dependencies import get_token_config, get_user_repo
from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import InfrastructureError
from services.token_service import TokenConfig, create_access_token, decode_token
from services.user_service import create_user

SECRET = b'test-secret-key-for-route-tests-0123456789'


class TestLogin(unittest.TestCase):
    """Tests for POST /api/auth/login."""

    def setUp(self):
        self.client = TestClient(app)
        self.repo = FakeUserRepository()
        self.config = TokenConfig(secret=SECRET, expiration_ms=60_000)
        app.dependency_overrides[get_user_repo] = lambda: self.repo
        app.dependency_overrides[get_token_config] = lambda: self.config
        with patch('services.passwords.BCRYPT_ROUNDS', 4):
            self.user = create_user(self.repo, 'a@x.com', 'password1')

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_login_success(self):
        response = self.client.post("/api/auth/login", json={"email": "a@x.com", "password": "password1"})

        assert response.status_code == 200
        data = response.json()
        assert data['type'] == 'Bearer'
        assert data['userId'] == self.user.id
        assert data['email'] == 'a@x.com'
        assert data['role'] == 'USER'
        claims = decode_token(data['token'], self.config)
        assert claims['userId'] == self.user.id
        assert claims['role'] == 'USER'

    def test_login_wrong_password(self):
        response = self.client.post("/api/auth/login", json={"email": "a@x.com", "password": "wrong"})

        assert response.status_code == 401
        assert response.json()['detail'] == "Invalid email or password"

    def test_login_unknown_email_indistinguishable(self):
        wrong = self.client.post("/api/auth/login", json={"email": "a@x.com", "password": "wrong"})
        unknown = self.client.post("/api/auth/login", json={"email": "nobody@x.com", "password": "password1"})

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    def test_login_inactive_account(self):
        self.repo.set_active(self.user.id, False)

        response = self.client.post("/api/auth/login", json={"email": "a@x.com", "password": "password1"})

        assert response.status_code == 403
        assert response.json()['detail'] == "User account is inactive"

    def test_login_store_unavailable(self):
        repo = MagicMock()
        repo.get_by_email.side_effect = InfrastructureError("down")
        app.dependency_overrides[get_user_repo] = lambda: repo

        response = self.client.post("/api/auth/login", json={"email": "a@x.com", "password": "password1"})
        assert response.status_code == 503

    def test_issued_token_validates(self):
        token = self.client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "password1"}
        ).json()['token']

        response = self.client.post("/api/auth/validate", json={"token": token})

        assert response.status_code == 200
        assert response.json() is True


class TestValidate(unittest.TestCase):
    """Tests for POST /api/auth/validate."""

    def setUp(self):
        self.client = TestClient(app)
        self.config = TokenConfig(secret=SECRET, expiration_ms=60_000)
        app.dependency_overrides[get_token_config] = lambda: self.config
        repo = FakeUserRepository()
        self.user = repo.create('a@x.com', 'hash')

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_expired_token(self):
        token = create_access_token(
            self.user, self.config, now=datetime.now(timezone.utc) - timedelta(minutes=5)
        )

        response = self.client.post("/api/auth/validate", json={"token": token})

        assert response.status_code == 200
        assert response.json() is False

    def test_token_signed_with_other_secret(self):
        other = TokenConfig(secret=b'z' * 48)
        token = create_access_token(self.user, other)

        response = self.client.post("/api/auth/validate", json={"token": token})
        assert response.json() is False

    def test_malformed_token(self):
        response = self.client.post("/api/auth/validate", json={"token": "garbage"})

        assert response.status_code == 200
        assert response.json() is False
