"""Unit tests for app.core.security: bcrypt hashing and JWT issue/decode."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.config import settings
from app.core.errors import (
    AuthenticationError,
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
)
from app.core.security import (
    BCRYPT_MAX_BYTES,
    create_access_token,
    decode_access_token,
    expires_in_ms,
    hash_password,
    secret_fits_bcrypt,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    """hash_password is salted and one-way; verify_password fails closed."""

    def test_hash_differs_from_secret(self) -> None:
        for secret in ("secret123", "x", "pässwörd", "a" * 72):
            self.assertNotEqual(hash_password(secret), secret)

    def test_verify_accepts_own_hash(self) -> None:
        for secret in ("secret123", "x", "pässwörd"):
            self.assertTrue(verify_password(secret, hash_password(secret)))

    def test_verify_rejects_other_secret(self) -> None:
        self.assertFalse(verify_password("secret123", hash_password("secret124")))

    def test_same_secret_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("secret123"), hash_password("secret123"))

    def test_malformed_or_missing_hash_denies(self) -> None:
        self.assertFalse(verify_password("secret123", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("secret123", ""))
        self.assertFalse(verify_password("secret123", None))

    def test_secrets_over_72_bytes_are_refused_not_truncated(self) -> None:
        prefix = "a" * BCRYPT_MAX_BYTES
        with self.assertRaises(ValueError):
            hash_password(prefix + "X")
        stored = hash_password(prefix)
        self.assertTrue(verify_password(prefix, stored))
        self.assertFalse(verify_password(prefix + "X", stored))
        self.assertFalse(verify_password(prefix + "Y", stored))

    def test_limit_counts_utf8_bytes(self) -> None:
        self.assertTrue(secret_fits_bcrypt("é" * 36))
        self.assertFalse(secret_fits_bcrypt("é" * 37))


class TestAccessToken(unittest.TestCase):
    """create_access_token / decode_access_token round trip and failure kinds."""

    def test_round_trip_returns_identity(self) -> None:
        token = create_access_token(42, "johndoe")
        claims = decode_access_token(token)
        self.assertEqual(claims.user_id, 42)
        self.assertEqual(claims.username, "johndoe")
        lifetime = claims.expires_at - claims.issued_at
        self.assertEqual(lifetime, timedelta(minutes=settings.JWT_EXPIRE_MINUTES))

    def test_expired_token(self) -> None:
        token = create_access_token(42, "johndoe", expires_minutes=-1)
        with self.assertRaises(TokenExpiredError):
            decode_access_token(token)

    def test_wrong_secret_is_signature_error(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "42", "username": "johndoe", "iat": now, "exp": now + timedelta(minutes=5)},
            "some-other-secret",
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(TokenSignatureError):
            decode_access_token(token)

    def test_tampered_payload_is_rejected(self) -> None:
        header, _, signature = create_access_token(42, "johndoe").split(".")
        _, forged_payload, _ = create_access_token(1, "admin").split(".")
        forged = ".".join([header, forged_payload, signature])
        with self.assertRaises(AuthenticationError):
            decode_access_token(forged)

    def test_garbage_is_malformed(self) -> None:
        with self.assertRaises(TokenMalformedError):
            decode_access_token("not-a-token")

    def test_missing_username_claim_is_malformed(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "42", "iat": now, "exp": now + timedelta(minutes=5)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(TokenMalformedError):
            decode_access_token(token)

    def test_non_numeric_subject_is_malformed(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "abc", "username": "johndoe", "iat": now, "exp": now + timedelta(minutes=5)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(TokenMalformedError):
            decode_access_token(token)

    def test_out_of_range_subject_is_malformed(self) -> None:
        now = datetime.now(UTC)
        for subject in ("0", "-3", "99999999999999999999"):
            token = jwt.encode(
                {"sub": subject, "username": "johndoe", "iat": now, "exp": now + timedelta(minutes=5)},
                settings.JWT_SECRET.get_secret_value(),
                algorithm=settings.JWT_ALGORITHM,
            )
            with self.assertRaises(TokenMalformedError):
                decode_access_token(token)

    def test_expires_in_ms_matches_settings(self) -> None:
        self.assertEqual(expires_in_ms(), settings.JWT_EXPIRE_MINUTES * 60_000)


if __name__ == "__main__":
    unittest.main()
