"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from lexiboard.domain.identity.entities.principal import Principal
from lexiboard.exceptions import CredentialsException, ForbiddenException
from lexiboard.infrastructure.identity.services.token_service import verify_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


async def get_current_user(token: Annotated[str | None, Depends(oauth2_scheme)]) -> Principal:
    """
    Get the caller from the access token.

    Raises:
        CredentialsException: If the token is missing or invalid
    """
    if not token:
        raise CredentialsException
    principal = verify_access_token(token)
    if principal is None:
        raise CredentialsException
    return principal


async def require_admin(user: Annotated[Principal, Depends(get_current_user)]) -> Principal:
    """
    Require an administrator token.

    Raises:
        ForbiddenException: If the caller is authenticated but not an admin
    """
    if not user.is_admin:
        raise ForbiddenException
    return user


CurrentUser = Annotated[Principal, Depends(get_current_user)]
AdminUser = Annotated[Principal, Depends(require_admin)]
