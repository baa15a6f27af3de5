"""Print a signed access token for manual testing against a running server.

Usage:
    python tests/jwt_generation.py 2 candidate
    websocat "ws://localhost:5001/ws?token=$(python tests/jwt_generation.py 2)"
"""

import sys
from pathlib import Path

# Add parent directory to path so we can import src
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from src.config.settings import Config
from src.domain.value_objects import AuthIdentity, UserEmail, UserId, UserRole
from src.infrastructure.security import JwtTokenService


def generate_jwt_token(user_id: int = 1, role: str = "candidate") -> str:
    """Generate a valid access token for testing API endpoints"""
    service = JwtTokenService(
        secret=Config.SERVICE_AUTH_SECRET,
        issuer=Config.SERVICE_AUTH_ISSUER,
        audience=Config.SERVICE_AUTH_AUDIENCE,
        access_ttl_seconds=Config.ACCESS_TOKEN_TTL_SECONDS,
        socket_ttl_seconds=Config.WS_TOKEN_TTL_SECONDS,
    )
    identity = AuthIdentity(
        id=UserId(user_id),
        email=UserEmail(f"user{user_id}@example.com"),
        role=UserRole(role),
    )
    return service.mint_access_token(identity)


if __name__ == "__main__":
    args = sys.argv[1:]
    print(generate_jwt_token(int(args[0]) if args else 1, args[1] if len(args) > 1 else "candidate"))
