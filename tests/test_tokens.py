from datetime import timedelta

import pytest

from bureau.core.security import JwtTokenIssuer, TokenExpiredError, TokenInvalidError
from bureau.core.timeutils import utcnow

SECRET = "test-secret-key-for-jwt"


def _tamper(token: str) -> str:
    header, payload, signature = token.split(".")
    replacement = "A" if signature[0] != "A" else "B"
    return ".".join([header, payload, replacement + signature[1:]])


def test_sign_and_verify():
    issuer = JwtTokenIssuer(SECRET)
    token = issuer.sign("account-1", timedelta(days=7))

    claims = issuer.verify(token)

    assert claims.account_id == "account-1"
    assert claims.expires_at > utcnow() + timedelta(days=6)


def test_altered_signature_is_invalid():
    issuer = JwtTokenIssuer(SECRET)
    token = issuer.sign("account-1", timedelta(days=7))

    with pytest.raises(TokenInvalidError):
        issuer.verify(_tamper(token))


def test_foreign_key_is_invalid():
    token = JwtTokenIssuer("another-secret-key").sign("account-1", timedelta(days=7))

    with pytest.raises(TokenInvalidError):
        JwtTokenIssuer(SECRET).verify(token)


def test_garbage_is_invalid():
    with pytest.raises(TokenInvalidError):
        JwtTokenIssuer(SECRET).verify("not.a.token")


def test_elapsed_token_is_expired():
    issued_in_the_past = JwtTokenIssuer(SECRET, clock=lambda: utcnow() - timedelta(days=8))
    token = issued_in_the_past.sign("account-1", timedelta(days=7))

    with pytest.raises(TokenExpiredError):
        JwtTokenIssuer(SECRET).verify(token)


def test_expiry_follows_the_injected_clock():
    now = [utcnow()]
    issuer = JwtTokenIssuer(SECRET, clock=lambda: now[0])
    token = issuer.sign("account-1", timedelta(days=7))

    now[0] += timedelta(days=6)
    assert issuer.verify(token).account_id == "account-1"

    now[0] += timedelta(days=2)
    with pytest.raises(TokenExpiredError):
        issuer.verify(token)
