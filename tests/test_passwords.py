"""
Tests for bcrypt password hashing.
"""

import pytest

from core.errors import InvalidPasswordError
from core.passwords import MAX_PASSWORD_BYTES, PasswordHasher


class TestPasswordHasher:
    def test_hash_is_not_plaintext(self, hasher):
        hashed = hasher.hash("pw123")
        assert hashed != "pw123"
        assert hashed.startswith("$2b$04$")

    def test_hash_is_salted(self, hasher):
        assert hasher.hash("pw123") != hasher.hash("pw123")

    @pytest.mark.parametrize("password", ["pw123", "", "pässwörd", "a b c", "x" * 60])
    def test_verify_matching_password(self, hasher, password):
        assert hasher.verify(password, hasher.hash(password)) is True

    @pytest.mark.parametrize("password,other", [("pw123", "pw124"), ("pw123", ""), ("abc", "ABC")])
    def test_verify_other_password(self, hasher, password, other):
        assert hasher.verify(other, hasher.hash(password)) is False

    def test_hash_from_earlier_work_factor_still_verifies(self, hasher):
        old_hash = PasswordHasher(rounds=5).hash("pw123")
        assert old_hash.startswith("$2b$05$")
        assert hasher.verify("pw123", old_hash) is True
        assert hasher.verify("wrong", old_hash) is False

    @pytest.mark.parametrize("stored", ["not-a-hash", "", "$2b$04$short"])
    def test_unrecognised_hash_returns_false(self, hasher, stored):
        assert hasher.verify("pw123", stored) is False

    def test_rounds_are_recorded_in_hash(self):
        assert PasswordHasher(rounds=6).hash("pw").startswith("$2b$06$")

    def test_password_at_byte_limit_is_hashed(self, hasher):
        password = "x" * MAX_PASSWORD_BYTES
        assert hasher.verify(password, hasher.hash(password)) is True

    @pytest.mark.parametrize("password", ["x" * 72 + "B", "é" * 37])
    def test_password_over_byte_limit_is_refused(self, hasher, password):
        with pytest.raises(InvalidPasswordError):
            hasher.hash(password)

    def test_passwords_sharing_first_72_bytes_are_not_equal(self, hasher):
        prefix = "x" * MAX_PASSWORD_BYTES
        assert hasher.verify(prefix + "A", hasher.hash(prefix)) is False

    def test_nul_character_is_refused(self, hasher):
        with pytest.raises(InvalidPasswordError):
            hasher.hash("a\x00b")

    def test_nul_character_never_verifies(self, hasher, caplog):
        assert hasher.verify("a\x00b", hasher.hash("ab")) is False
        assert "could not be identified" not in caplog.text

    def test_verify_dummy_is_always_false(self, hasher):
        assert hasher.verify_dummy("pw123") is False
