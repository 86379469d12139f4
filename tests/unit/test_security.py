"""
Unit tests for placeholder_api.core.security
"""
from placeholder_api.core.security import hash_password, verify_password


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123")
        assert result != "secret123"


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_empty_password(self):
        hashed = hash_password("")
        assert verify_password("", hashed) is True
        assert verify_password("x", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False

    def test_password_longer_than_bcrypt_limit(self):
        long_password = "p" * 80
        hashed = hash_password(long_password)
        assert verify_password(long_password, hashed) is True
        # Only the first 72 bytes take part in the hash
        assert verify_password("p" * 72 + "different", hashed) is True
        assert verify_password("p" * 71, hashed) is False

    def test_multibyte_password_over_limit(self):
        long_password = "пароль" * 10
        hashed = hash_password(long_password)
        assert verify_password(long_password, hashed) is True
