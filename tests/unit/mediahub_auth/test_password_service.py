"""Unit tests for PasswordHashingService."""

import pytest

from mediahub_auth import PasswordHashingService, WeakPasswordError


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        hashed = self.service.hash("secure_password123")

        assert hashed.startswith("$2")
        assert len(hashed) >= 50

    def test_verify_correct_password(self):
        hashed = self.service.hash("my_secret")

        assert self.service.verify("my_secret", hashed) is True

    def test_verify_incorrect_password(self):
        hashed = self.service.hash("my_secret")

        assert self.service.verify("wrong_password", hashed) is False

    def test_verify_invalid_hash_returns_false(self):
        assert self.service.verify("password", "not_a_valid_hash") is False
        assert self.service.verify("password", "") is False

    def test_hash_is_salted(self):
        hash1 = self.service.hash("same_password")
        hash2 = self.service.hash("same_password")

        assert hash1 != hash2


class TestPasswordValidation:
    """Tests for password strength validation."""

    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_empty_password_raises(self):
        with pytest.raises(WeakPasswordError, match="cannot be empty"):
            self.service.validate_strength("")

    def test_short_password_raises(self):
        with pytest.raises(WeakPasswordError, match="at least 6"):
            self.service.validate_strength("12345")

    def test_six_characters_is_enough(self):
        self.service.validate_strength("123456")

    def test_password_over_72_bytes_raises(self):
        with pytest.raises(WeakPasswordError, match="72 bytes"):
            self.service.validate_strength("ä" * 40)
