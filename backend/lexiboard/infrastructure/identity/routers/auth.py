import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette import status

from lexiboard.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from lexiboard.core import container
from lexiboard.domain.identity.exceptions import InvalidCredentialsError
from lexiboard.infrastructure.common.di import inject_use_case
from lexiboard.infrastructure.identity.dependencies import CurrentUser
from lexiboard.infrastructure.identity.services.token_service import AccessToken

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])
limiter = Limiter(key_func=get_remote_address)


class MeResponse(BaseModel):
    """The caller behind the current access token."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: str
    is_admin: bool


@router.post("/login", response_model=AccessToken)
@limiter.limit("5/minute")  # type: ignore[misc]
async def login(
    request: Request,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> AccessToken:
    try:
        _, token = use_case.authenticate(form_data.username, form_data.password)
        return token
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None


@router.get("/me", response_model=MeResponse, response_model_by_alias=True)
async def me(user: CurrentUser) -> MeResponse:
    """Return who the access token belongs to."""
    return MeResponse(username=user.username, is_admin=user.is_admin)
