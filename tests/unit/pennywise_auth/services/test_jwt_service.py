"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from pennywise_auth.exceptions import InvalidTokenError
from pennywise_auth.services import JWTService

SECRET = "test-secret-key-with-enough-length-for-hs256"
AUDIENCE = "authenticated"


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        """Test that service initializes with valid secret."""
        service = JWTService(secret_key=SECRET)
        assert service is not None

    def test_init_with_empty_secret_raises(self):
        """Test that empty secret raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")


class TestAccessTokens:
    """Tests for verifying provider-style access tokens."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key=SECRET, audience=AUDIENCE)
        self.user_id = uuid4()
        self.email = "test@example.com"

    def test_verify_valid_access_token(self):
        """Test that a valid token is verified correctly."""
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
        )

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert payload.email == self.email
        assert payload.role == "authenticated"
        assert not payload.is_anonymous()
        assert payload.is_expired() is False

    def test_anonymous_role_is_reported(self):
        """Test that a signed-out session token is flagged as anonymous."""
        token = self.service.create_access_token(
            user_id=self.user_id,
            email="",
            role="anon",
        )

        assert self.service.verify_token(token).is_anonymous()

    def test_verify_expired_token_raises(self):
        """Test that expired token raises InvalidTokenError."""
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
            expires_delta=timedelta(seconds=-1),  # Already expired
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_verify_invalid_token_raises(self):
        """Test that invalid token raises InvalidTokenError."""
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("invalid.token.string")

    def test_verify_tampered_token_raises(self):
        """Test that tampered token raises InvalidTokenError."""
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
        )

        tampered = token[:-5] + "xxxxx"

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(tampered)

    def test_verify_wrong_secret_raises(self):
        """Test that token from different secret raises InvalidTokenError."""
        other_service = JWTService(
            secret_key="a-different-secret-that-is-also-long-enough",
            audience=AUDIENCE,
        )
        token = other_service.create_access_token(
            user_id=self.user_id,
            email=self.email,
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_wrong_audience_raises(self):
        """Test that tokens minted for another audience are rejected."""
        other_service = JWTService(secret_key=SECRET, audience="someone-else")
        token = other_service.create_access_token(
            user_id=self.user_id,
            email=self.email,
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_missing_audience_raises(self):
        """Test that a token without an audience claim is rejected."""
        token = JWTService(secret_key=SECRET).create_access_token(
            user_id=self.user_id,
            email=self.email,
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_non_uuid_subject_raises(self):
        """Test that a subject which is not a UUID is a malformed payload."""
        token = jwt.encode(
            {
                "sub": "not-a-uuid",
                "aud": AUDIENCE,
                "exp": datetime.now(tz=timezone.utc) + timedelta(minutes=5),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)


class TestAudienceDisabled:
    """Tests for services configured without an audience check."""

    def test_token_without_audience_verifies(self):
        """Test that the audience check can be switched off."""
        service = JWTService(secret_key=SECRET)
        user_id = uuid4()

        token = service.create_access_token(user_id=user_id, email="x@example.com")

        assert service.verify_token(token).user_id == user_id
