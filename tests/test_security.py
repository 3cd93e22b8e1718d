"""
Tests for password hashing and verification.
"""

import pytest

from app.auth.security import BCRYPT_ROUNDS, get_password_hash, pwd_context, verify_password


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        token = get_password_hash("secret123")
        assert "secret123" not in token

    def test_token_embeds_scheme_and_cost(self):
        token = get_password_hash("secret123")
        assert token.startswith("$bcrypt-sha256$")
        assert f"r={BCRYPT_ROUNDS}" in token

    def test_fresh_salt_per_call(self):
        assert get_password_hash("secret123") != get_password_hash("secret123")

    @pytest.mark.parametrize("password", ["secret123", "p", "ünïcødé-pässwörd", "x" * 100])
    def test_verify_matches_own_hash(self, password):
        assert verify_password(password, get_password_hash(password))

    @pytest.mark.parametrize("other", ["wrong", "secret12", "secret1234", "SECRET123", ""])
    def test_verify_rejects_other_passwords(self, other):
        assert not verify_password(other, get_password_hash("secret123"))

    def test_long_passwords_are_not_truncated(self):
        base = "a" * 72
        assert not verify_password(base + "tail-one", get_password_hash(base + "tail-two"))

    def test_plain_bcrypt_tokens_still_verify(self):
        legacy = pwd_context.handler("bcrypt").using(rounds=4).hash("secret123")
        assert verify_password("secret123", legacy)
        assert not verify_password("wrong", legacy)

    @pytest.mark.parametrize("garbage", ["", "not-a-hash", "$2b$10$short"])
    def test_malformed_hash_verifies_false(self, garbage):
        assert verify_password("secret123", garbage) is False
