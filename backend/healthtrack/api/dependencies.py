"""
Request dependencies: database session and caller identity.

A protected route declares ``db: Session = Depends(get_db)`` before
``identity: Identity = Depends(get_current_identity)``, so the connection is
acquired first and a rejected token short-circuits the route with the
connection still released by the session scope. ``get_current_identity``
shares the route's session (FastAPI caches ``get_db`` per request) to check
that the token's user still exists.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from healthtrack.core.errors import Unauthenticated
from healthtrack.core.security import Identity, TokenCodec, TokenError
from healthtrack.db.session import get_db
from healthtrack.models.user import User

logger = logging.getLogger("healthtrack.auth")

MISSING_CREDENTIALS = "Invalid authorization, no authorization headers"
BAD_SCHEME = "Invalid authorization, invalid authorization scheme"
UNKNOWN_USER = "Unknown user"


@dataclass(frozen=True)
class AuthFailure:
    """Emitted when a presented token fails verification."""
    kind: str
    reason: str


class AuthGate:
    """Resolves the ``Authorization`` header into an ``Identity`` or rejects it."""

    def __init__(self, codec: TokenCodec, scheme: str = "Bearer"):
        self.codec = codec
        self.scheme = scheme
        self._listeners: List[Callable[[AuthFailure], None]] = []

    def add_listener(self, listener: Callable[[AuthFailure], None]) -> None:
        """Register a callback for token verification failures."""
        self._listeners.append(listener)

    def _emit(self, failure: AuthFailure) -> None:
        logger.warning(f"Token verification failed ({failure.kind}): {failure.reason}")
        for listener in self._listeners:
            listener(failure)

    def authenticate(self, authorization: Optional[str]) -> Identity:
        if not authorization:
            raise Unauthenticated(MISSING_CREDENTIALS, kind="missing_credentials")

        parts = authorization.split(" ")
        if len(parts) != 2 or parts[0] != self.scheme or not parts[1]:
            raise Unauthenticated(BAD_SCHEME, kind="bad_scheme")

        try:
            return self.codec.verify(parts[1])
        except TokenError as e:
            self._emit(AuthFailure(kind=e.kind, reason=str(e)))
            raise Unauthenticated(e.reason, kind=e.kind) from e


def get_current_identity(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db)
) -> Identity:
    """Dependency resolving the caller; raises before the route body runs."""
    gate: AuthGate = request.app.state.auth_gate
    identity = gate.authenticate(authorization)

    # A validly signed token can outlive its account
    if db.query(User.id).filter(User.id == identity.user_id).first() is None:
        logger.warning(f"Token names unknown user {identity.user_id}")
        raise Unauthenticated(UNKNOWN_USER, kind="unknown_user")
    return identity
