"""
Tests for password hashing and random password generation.
"""

import pytest

from jobly.core.security import generate_random_password, get_password_hash, verify_password


class TestPasswordHashing:
    """Tests for get_password_hash / verify_password"""

    def test_hash_is_bcrypt(self):
        """Hashes use the $2b$ bcrypt ident and never contain the password"""
        hashed = get_password_hash("password1")

        assert hashed.startswith("$2b$")
        assert "password1" not in hashed

    def test_hash_uses_configured_work_factor(self):
        """The cost segment matches BCRYPT_WORK_FACTOR (4 in tests)"""
        assert get_password_hash("password1").startswith("$2b$04$")

    def test_verify_password(self):
        """The right password verifies, a wrong one does not"""
        hashed = get_password_hash("password1")

        assert verify_password("password1", hashed)
        assert not verify_password("password2", hashed)

    def test_hashes_are_salted(self):
        """Hashing the same password twice gives different hashes"""
        assert get_password_hash("same") != get_password_hash("same")

    def test_long_password_truncated(self):
        """Passwords past bcrypt's 72-byte limit are truncated, not rejected"""
        long_password = "a" * 100
        hashed = get_password_hash(long_password)

        assert verify_password(long_password, hashed)
        assert verify_password("a" * 72, hashed)


class TestGenerateRandomPassword:
    """Tests for generate_random_password"""

    @pytest.mark.parametrize("length", [0, 1, 5, 10, 32])
    def test_lengths(self, length):
        """Passwords have the requested length"""
        password = generate_random_password(length)

        assert isinstance(password, str)
        assert len(password) == length

    def test_default_length(self):
        """The default length is 10"""
        assert len(generate_random_password()) == 10

    def test_alphanumeric(self):
        """Only letters and digits are used"""
        assert generate_random_password(50).isalnum()

    def test_negative_length(self):
        """Negative lengths are rejected"""
        with pytest.raises(ValueError):
            generate_random_password(-1)
