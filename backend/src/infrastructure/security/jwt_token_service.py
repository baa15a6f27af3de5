"""
JWT Token Service - HS256 credentials shared by the HTTP layer and the socket upgrade.

Claims:
    {
        "sub": "42",               # str(userId), PyJWT requires a string subject
        "userId": 42,
        "email": "jane@example.com",
        "role": "candidate" | "employer",
        "iat": ..., "exp": ..., "iss": ..., "aud": ...
    }

Tokens are stateless: nothing is stored server side and expiry is the only
invalidation mechanism.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from src.domain.exceptions import UnauthenticatedError
from src.domain.ports.token_service import TokenService
from src.domain.value_objects import AuthIdentity, UserEmail, UserId, UserRole

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class JwtTokenService(TokenService):
    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        access_ttl_seconds: int,
        socket_ttl_seconds: int,
    ):
        if not secret:
            raise ValueError("JWT signing secret must not be empty")
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._access_ttl = timedelta(seconds=access_ttl_seconds)
        self._socket_ttl = timedelta(seconds=socket_ttl_seconds)

    def mint_access_token(self, identity: AuthIdentity) -> str:
        return self._mint(identity, self._access_ttl)

    def mint_socket_token(self, identity: AuthIdentity) -> str:
        return self._mint(identity, self._socket_ttl)

    def _mint(self, identity: AuthIdentity, ttl: timedelta) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(identity.id.value),
            "userId": identity.id.value,
            "email": identity.email.value,
            "role": identity.role.value,
            "iat": now,
            "exp": now + ttl,
            "iss": self._issuer,
            "aud": self._audience,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> AuthIdentity:
        """
        Verify signature, expiry, issuer and audience, then map claims to an identity.

        Raises:
            UnauthenticatedError: token absent, malformed, tampered, expired
                or missing required claims
        """
        if not token:
            raise UnauthenticatedError("Authentication required")

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp", "iat", "aud", "iss"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise UnauthenticatedError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise UnauthenticatedError(f"Invalid token: {e}") from e

        try:
            return AuthIdentity(
                id=UserId(claims.get("userId")),
                email=UserEmail(claims.get("email") or ""),
                role=UserRole(claims.get("role")),
            )
        except ValueError as e:
            raise UnauthenticatedError(f"Invalid token claims: {e}") from e
