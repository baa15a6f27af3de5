"""
Authentication Dependency for FastAPI.

Guidelines:
- Extracts the bearer token from the Authorization header
- Verifies it with the container's TokenService (same key and claims as /ws)
- Returns AuthIdentity for use in route handlers
- Raises HTTPException 401 if unauthorized, 403 for the wrong role
"""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.domain.exceptions import UnauthenticatedError
from src.domain.ports import TokenService
from src.domain.value_objects import AuthIdentity

security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> AuthIdentity:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is missing, invalid, expired, or missing required claims
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    token_service = await request.state.dishka_container.get(TokenService)
    try:
        return token_service.verify(credentials.credentials)
    except UnauthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


async def require_employer(
    current_user: AuthIdentity = Depends(get_current_user),
) -> AuthIdentity:
    if not current_user.is_employer:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only employers can perform this action",
        )
    return current_user
