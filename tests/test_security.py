from datetime import datetime, timedelta, timezone

from jose import jwt

from app.core.security import (
    TokenError,
    TokenService,
    hash_password,
    verify_password,
)

IDENTITY = {"id": 7, "username": "alice", "email": "alice@example.com"}


def test_issue_embeds_identity_and_24h_expiry():
    svc = TokenService("s3cret")
    now = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    claims = jwt.get_unverified_claims(svc.issue(IDENTITY, now=now))

    assert claims["id"] == 7
    assert claims["username"] == "alice"
    assert claims["email"] == "alice@example.com"
    assert claims["iat"] == int(now.timestamp())
    assert claims["exp"] - claims["iat"] == 24 * 3600


def test_issue_is_deterministic_for_same_input():
    svc = TokenService("s3cret")
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert svc.issue(IDENTITY, now=now) == svc.issue(IDENTITY, now=now)


def test_verify_returns_claims_unchanged():
    svc = TokenService("s3cret")
    token = svc.issue(IDENTITY)

    check = svc.verify(token)

    assert check.ok
    assert check.error is None
    assert check.claims == jwt.get_unverified_claims(token)


def test_verify_rejects_garbage_as_malformed():
    check = TokenService("s3cret").verify("not-a-token")
    assert not check.ok
    assert check.error is TokenError.MALFORMED
    assert check.claims is None


def test_verify_rejects_other_secret_as_invalid_signature():
    token = TokenService("other").issue(IDENTITY)
    check = TokenService("s3cret").verify(token)
    assert check.error is TokenError.INVALID_SIGNATURE


def test_verify_rejects_tampered_payload():
    svc = TokenService("s3cret")
    forged = jwt.encode({**IDENTITY, "exp": 4102444800}, "attacker", algorithm="HS256")
    header, _, sig = svc.issue(IDENTITY).split(".")
    _, payload, _ = forged.split(".")
    assert svc.verify(f"{header}.{payload}.{sig}").error is TokenError.INVALID_SIGNATURE


def test_verify_rejects_expired_token():
    svc = TokenService("s3cret")
    issued = datetime.now(timezone.utc) - timedelta(hours=25)
    check = svc.verify(svc.issue(IDENTITY, now=issued))
    assert check.error is TokenError.EXPIRED


def test_verify_respects_injected_clock():
    svc = TokenService("s3cret")
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    token = svc.issue(IDENTITY, now=now)

    assert svc.verify(token, now=now + timedelta(hours=23)).ok
    assert svc.verify(token, now=now + timedelta(hours=24, seconds=1)).error is TokenError.EXPIRED


def test_password_hash_is_salted_and_verifiable():
    h1 = hash_password("admin123")
    h2 = hash_password("admin123")

    assert h1 != "admin123"
    assert h1 != h2
    assert verify_password("admin123", h1)
    assert not verify_password("wrong", h1)
