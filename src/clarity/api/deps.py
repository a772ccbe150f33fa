"""FastAPI dependency injection for authentication and database."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from clarity.core.security import get_user_id_from_token
from clarity.db.session import get_db  # noqa: F401
from clarity.services.advice import AdviceClient

# Bearer tokens are issued by the identity service.
security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> UUID:
    """
    Extract and validate the user id from the bearer token.

    Raises:
        HTTPException: If the token is missing, invalid or expired
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception

    try:
        user_id = get_user_id_from_token(credentials.credentials)
    except (JWTError, ValueError) as exc:
        raise credentials_exception from exc

    request.state.user_id = user_id
    return user_id


def get_advice_client() -> AdviceClient | None:
    return AdviceClient.from_settings()


CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
