"""
Token Service Port - Mint and verify signed, time-limited credentials.

The HTTP auth layer and the socket upgrade share one implementation so both
use the same signing key and the same claim shape.
"""

from abc import ABC, abstractmethod

from src.domain.value_objects.auth_identity import AuthIdentity


class TokenService(ABC):
    @abstractmethod
    def mint_access_token(self, identity: AuthIdentity) -> str:
        """Standard login token (long-lived)."""
        ...

    @abstractmethod
    def mint_socket_token(self, identity: AuthIdentity) -> str:
        """Short-lived token handed to the client right before it opens a socket."""
        ...

    @abstractmethod
    def verify(self, token: str) -> AuthIdentity:
        """Return the identity or raise UnauthenticatedError."""
        ...
