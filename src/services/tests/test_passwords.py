"""Unit tests for bcrypt password helpers."""

import unittest
from unittest.mock import patch

from domain.model.errors import ValidationError
from services.passwords import hash_password, validate_password, verify_password


@patch('services.passwords.BCRYPT_ROUNDS', 4)
class TestPasswordHashing(unittest.TestCase):

    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = hash_password('password1')

        self.assertNotEqual(hashed, 'password1')
        self.assertTrue(hashed.startswith('$2'))
        self.assertTrue(verify_password('password1', hashed))
        self.assertFalse(verify_password('password2', hashed))

    def test_hash_is_salted(self):
        self.assertNotEqual(hash_password('password1'), hash_password('password1'))

    def test_overlong_password_never_verifies(self):
        hashed = hash_password('a' * 72)
        self.assertFalse(verify_password('a' * 73, hashed))


class TestValidatePassword(unittest.TestCase):

    def test_accepts_eight_characters(self):
        validate_password('12345678')

    def test_rejects_short_password(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_password('short')
        self.assertIn('at least 8', str(ctx.exception))

    def test_rejects_password_over_72_bytes(self):
        with self.assertRaises(ValidationError):
            validate_password('ü' * 40)
