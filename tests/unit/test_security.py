"""
Unit tests for employee_backend.core.security
"""
import time

import pytest
from employee_backend.core.exceptions import InvalidToken, MissingToken
from employee_backend.core.security import (
    TokenClaims,
    TokenService,
    create_jwt_token,
    decode_jwt_token,
    hash_password,
    verify_password,
)
from tests.conftest import TEST_JWT_SECRET

OTHER_SECRET = "another_secret_key_that_did_not_sign_anything_42"


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword", rounds=4)
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same", rounds=4)
        h2 = hash_password("same", rounds=4)
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123", rounds=4)
        assert result != "secret123"
        assert "secret123" not in result

    def test_work_factor_is_encoded_in_hash(self):
        assert hash_password("pw", rounds=5).startswith("$2b$05$")


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct", rounds=4)
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct", rounds=4)
        assert verify_password("wrong", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False

    def test_long_password_uses_first_72_bytes(self):
        long_password = "x" * 100
        hashed = hash_password(long_password, rounds=4)
        assert verify_password(long_password, hashed) is True


class TestJwtToken:
    """Tests for create_jwt_token and decode_jwt_token"""

    def test_create_and_decode_roundtrip(self):
        token = create_jwt_token({"email": "test@example.com"}, TEST_JWT_SECRET)
        decoded = decode_jwt_token(token, TEST_JWT_SECRET)
        assert decoded == {"email": "test@example.com"}

    def test_no_expiry_by_default(self):
        token = create_jwt_token({"email": "a@x.com"}, TEST_JWT_SECRET)
        assert "exp" not in decode_jwt_token(token, TEST_JWT_SECRET)

    def test_expiry_when_requested(self):
        token = create_jwt_token({"email": "a@x.com"}, TEST_JWT_SECRET, expire_minutes=5)
        decoded = decode_jwt_token(token, TEST_JWT_SECRET)
        assert decoded["exp"] - decoded["iat"] == 300
        assert decoded["exp"] > time.time()

    def test_decode_invalid_token_raises(self):
        with pytest.raises(InvalidToken) as exc_info:
            decode_jwt_token("invalid.jwt.token", TEST_JWT_SECRET)
        assert "Invalid token" in str(exc_info.value)

    def test_decode_tampered_token_raises(self):
        token = create_jwt_token({"email": "a@x.com"}, TEST_JWT_SECRET)
        tampered = token[:-5] + "xxxxx"
        with pytest.raises(InvalidToken):
            decode_jwt_token(tampered, TEST_JWT_SECRET)


class TestTokenService:
    """Tests for TokenService.issue_token / verify_token"""

    def test_verify_issued_token_returns_email(self, token_service):
        token = token_service.issue_token("a@x.com")
        assert token_service.verify_token(token) == TokenClaims(email="a@x.com")

    def test_missing_token_raises(self, token_service):
        with pytest.raises(MissingToken):
            token_service.verify_token(None)
        with pytest.raises(MissingToken):
            token_service.verify_token("")

    def test_foreign_secret_raises(self, token_service):
        foreign = TokenService(secret_key=OTHER_SECRET).issue_token("a@x.com")
        with pytest.raises(InvalidToken):
            token_service.verify_token(foreign)

    def test_token_without_email_claim_raises(self, token_service):
        token = create_jwt_token({"sub": "user-1"}, TEST_JWT_SECRET)
        with pytest.raises(InvalidToken, match="missing email"):
            token_service.verify_token(token)

    def test_expired_token_raises(self):
        service = TokenService(secret_key=TEST_JWT_SECRET)
        expired = create_jwt_token(
            {"email": "a@x.com", "exp": int(time.time()) - 60}, TEST_JWT_SECRET
        )
        with pytest.raises(InvalidToken):
            service.verify_token(expired)

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            TokenService(secret_key="")
