"""Security - credential implementations."""

from src.infrastructure.security.jwt_token_service import JwtTokenService

__all__ = ["JwtTokenService"]
