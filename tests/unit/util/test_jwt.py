"""Unit tests for JWT utilities and JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from board.config import AuthSettings
from board.domain.service import JWTService
from board.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


class TestTokens:
    """Tests for create_token and verify_token."""

    def test_round_trip_carries_user_id_and_email(self):
        token = create_token(5, "five@example.com", SETTINGS)

        payload = verify_token(token, SETTINGS)

        assert payload.user_id == 5
        assert payload.email == "five@example.com"

    def test_wrong_secret_is_rejected(self):
        token = create_token(5, "five@example.com", SETTINGS)

        with pytest.raises(JWTError):
            verify_token(token, AuthSettings(jwt_secret="other-secret"))

    def test_wrong_audience_is_rejected(self):
        token = create_token(5, "five@example.com", SETTINGS)
        settings = AuthSettings(jwt_secret="test-secret", jwt_audience="someone-else")

        with pytest.raises(JWTError):
            verify_token(token, settings)

    def test_expired_token_is_rejected(self):
        token = jwt.encode(
            {
                "userId": 5,
                "email": "five@example.com",
                "iss": SETTINGS.jwt_issuer,
                "aud": SETTINGS.jwt_audience,
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_missing_user_claim_is_rejected(self):
        token = jwt.encode(
            {
                "email": "five@example.com",
                "iss": SETTINGS.jwt_issuer,
                "aud": SETTINGS.jwt_audience,
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            verify_token(token, SETTINGS)


class TestJWTService:
    """Tests for JWTService.get_user_id_from_token."""

    def test_valid_token_gives_user_id(self):
        service = JWTService(SETTINGS)
        token = service.create_token(3, "three@example.com")

        assert service.get_user_id_from_token(token) == 3

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_invalid_token_gives_none(self, token):
        assert JWTService(SETTINGS).get_user_id_from_token(token) is None
