"""
Security utilities for JWT identity tokens and password hashing.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import hashlib
import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError
from healthtrack.core.config import Settings

USER_ID_CLAIM = "userId"
RESERVED_CLAIMS = frozenset({USER_ID_CLAIM, "iat", "exp"})


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    Returns bytes (32 bytes) which is well under bcrypt's 72-byte limit.
    """
    return hashlib.sha256(password.encode('utf-8')).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    pre_hashed = _pre_hash_password(plain_password)
    # hashed_password is a string starting with $2b$, convert to bytes for bcrypt
    return bcrypt.checkpw(pre_hashed, hashed_password.encode('utf-8'))


def get_password_hash(password: str) -> str:
    """
    Hash a password.
    Pre-hashes with SHA256 first to support passwords longer than 72 bytes.
    """
    pre_hashed = _pre_hash_password(password)
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(pre_hashed, salt)
    # Return as string for database storage
    return hashed.decode('utf-8')


class TokenError(Exception):
    """Base class for identity token verification failures."""
    kind = "invalid_token"
    reason = "Invalid token"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.reason)


class InvalidSignature(TokenError):
    kind = "invalid_signature"
    reason = "Invalid token"


class TokenExpired(TokenError):
    kind = "expired"
    reason = "Token expired"


class MalformedToken(TokenError):
    kind = "malformed"
    reason = "Malformed token"


@dataclass(frozen=True)
class Identity:
    """The caller resolved from a verified token."""
    user_id: int
    claims: Dict[str, Any] = field(default_factory=dict)


class TokenCodec:
    """
    Issues and verifies signed, time-bound identity tokens.

    The codec holds no state beyond its key material, so one instance is
    shared by every request of an application.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_delta: timedelta = timedelta(days=7)):
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenCodec":
        return cls(
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            expires_delta=timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
        )

    def issue(self, user_id: int, claims: Optional[Dict[str, Any]] = None, expires_delta: Optional[timedelta] = None) -> str:
        """Create a token asserting ``user_id`` plus the caller's claims."""
        claims = dict(claims or {})
        reserved = RESERVED_CLAIMS.intersection(claims)
        if reserved:
            raise ValueError(f"Reserved claim names: {sorted(reserved)}")

        issued_at = datetime.now(timezone.utc)
        to_encode = {USER_ID_CLAIM: user_id, **claims}
        to_encode.update({
            "iat": issued_at,
            "exp": issued_at + (expires_delta if expires_delta is not None else self.expires_delta),
        })
        return jwt.encode(to_encode, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        """
        Decode and verify a token.

        Raises ``MalformedToken`` when the token cannot be parsed or carries
        unusable registered claims,
        ``InvalidSignature`` when it was not signed with our secret and
        ``TokenExpired`` when its validity window has elapsed.
        """
        if not token:
            raise MalformedToken("Empty token")

        # Structural check first so a garbled token is not reported as forged
        try:
            jwt.get_unverified_claims(token)
        except JWTError as exc:
            raise MalformedToken(str(exc)) from exc

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise TokenExpired() from exc
        except JWTClaimsError as exc:
            # Signature checked out but a registered claim (exp, nbf...) is unusable
            raise MalformedToken(str(exc)) from exc
        except JWTError as exc:
            raise InvalidSignature(str(exc)) from exc

        user_id = payload.get(USER_ID_CLAIM)
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise MalformedToken(f"Token has no integer {USER_ID_CLAIM} claim")

        claims = {key: value for key, value in payload.items() if key not in RESERVED_CLAIMS}
        return Identity(user_id=user_id, claims=claims)
