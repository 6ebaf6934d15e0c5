"""
Tests for the identity token codec and password hashing.
"""
from datetime import timedelta
import pytest
from jose import jwt
from healthtrack.core.security import (
    TokenCodec, Identity, InvalidSignature, TokenExpired, MalformedToken,
    get_password_hash, verify_password
)

SECRET = "codec-test-secret"


@pytest.fixture
def token_codec():
    return TokenCodec(SECRET)


@pytest.mark.parametrize("user_id, claims", [
    (1, {}),
    (42, {"username": "alice"}),
    (7, {"username": "bob", "roles": ["member"], "nested": {"a": 1}}),
])
def test_issue_verify_round_trip(token_codec, user_id, claims):
    """A freshly issued token verifies to the same user and claims."""
    identity = token_codec.verify(token_codec.issue(user_id, claims))
    assert identity == Identity(user_id=user_id, claims=claims)


def test_token_payload_carries_user_id_and_expiry(token_codec):
    """The signed payload uses the userId claim and an expiry window."""
    payload = jwt.get_unverified_claims(token_codec.issue(5, {"username": "carol"}))
    assert payload["userId"] == 5
    assert payload["username"] == "carol"
    assert payload["exp"] > payload["iat"]


def test_reserved_claims_rejected(token_codec):
    """Callers cannot override userId or the validity window."""
    for name in ("userId", "exp", "iat"):
        with pytest.raises(ValueError):
            token_codec.issue(1, {name: 2})


def test_token_signed_with_other_secret(token_codec):
    """A token signed with another secret fails as an invalid signature."""
    forged = TokenCodec("some-other-secret").issue(1, {"username": "alice"})
    with pytest.raises(InvalidSignature):
        token_codec.verify(forged)


def test_tampered_payload(token_codec):
    """Swapping the payload of a signed token breaks its signature."""
    header, _, signature = token_codec.issue(1).split(".")
    _, other_payload, _ = token_codec.issue(2).split(".")
    with pytest.raises(InvalidSignature):
        token_codec.verify(".".join([header, other_payload, signature]))


def test_expired_token(token_codec):
    """A token past its expiry is rejected as expired."""
    token = token_codec.issue(1, expires_delta=timedelta(seconds=-5))
    with pytest.raises(TokenExpired):
        token_codec.verify(token)


def test_expired_and_forged_token_reports_signature(token_codec):
    """Signature is checked before expiry."""
    token = TokenCodec("some-other-secret").issue(1, expires_delta=timedelta(seconds=-5))
    with pytest.raises(InvalidSignature):
        token_codec.verify(token)


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c", "only.two"])
def test_malformed_token(token_codec, token):
    """Tokens that cannot be parsed are malformed, not forged."""
    with pytest.raises(MalformedToken):
        token_codec.verify(token)


@pytest.mark.parametrize("payload", [{"username": "alice"}, {"userId": "1"}, {"userId": True}])
def test_token_without_integer_user_id(token_codec, payload):
    """A correctly signed token must still name an integer user."""
    token = jwt.encode(payload, SECRET, algorithm="HS256")
    with pytest.raises(MalformedToken):
        token_codec.verify(token)


@pytest.mark.parametrize("payload", [{"userId": 1, "exp": "soon"}, {"userId": 1, "nbf": "later"}])
def test_token_with_unusable_time_claims(token_codec, payload):
    """A correctly signed token whose exp/nbf cannot be read is malformed."""
    token = jwt.encode(payload, SECRET, algorithm="HS256")
    with pytest.raises(MalformedToken):
        token_codec.verify(token)


def test_error_kinds():
    assert InvalidSignature.kind == "invalid_signature"
    assert TokenExpired.kind == "expired"
    assert MalformedToken.kind == "malformed"


def test_codec_requires_secret():
    with pytest.raises(ValueError):
        TokenCodec("")


def test_password_hash_round_trip():
    """Hashes verify against the original password only."""
    hashed = get_password_hash("pw1")
    assert hashed != "pw1"
    assert verify_password("pw1", hashed)
    assert not verify_password("pw2", hashed)


def test_long_password_hash():
    """Passwords over bcrypt's 72-byte limit are still distinguished."""
    base = "x" * 100
    hashed = get_password_hash(base + "a")
    assert verify_password(base + "a", hashed)
    assert not verify_password(base + "b", hashed)
