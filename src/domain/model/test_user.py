"""Unit tests for User domain model — Role, normalize_email, public view."""

import unittest
from datetime import datetime, timezone

from domain.model.user import DEFAULT_ROLE, Role, User, normalize_email


def _user(**kwargs) -> User:
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    defaults = dict(
        id='u-1', email='a@x.com', password_hash='$2b$12$secret',
        created_at=now, updated_at=now,
    )
    defaults.update(kwargs)
    return User(**defaults)


class TestRole(unittest.TestCase):

    def test_default_role_is_user(self):
        self.assertEqual(DEFAULT_ROLE, Role.USER)
        self.assertEqual(_user().role, Role.USER)

    def test_role_is_string_enum(self):
        """Role values are what MongoDB stores and what the token carries."""
        self.assertEqual(Role('ADMIN'), Role.ADMIN)
        self.assertEqual(Role.MODERATOR, 'MODERATOR')

    def test_unknown_role_rejected(self):
        with self.assertRaises(ValueError):
            Role('SUPERUSER')


class TestNormalizeEmail(unittest.TestCase):

    def test_lowercases_and_strips(self):
        self.assertEqual(normalize_email('  Alice@Example.COM '), 'alice@example.com')


class TestUserPublicView(unittest.TestCase):

    def test_to_public_omits_password_hash(self):
        public = _user().to_public()
        self.assertNotIn('password_hash', public)
        self.assertEqual(public['email'], 'a@x.com')
        self.assertTrue(public['active'])

    def test_repr_omits_password_hash(self):
        self.assertNotIn('$2b$12$secret', repr(_user()))
