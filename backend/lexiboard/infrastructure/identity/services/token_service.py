"""Token creation and verification service."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel

from lexiboard.config import get_settings
from lexiboard.domain.identity.entities.principal import Principal, Role

settings = get_settings()
SECRET_KEY = settings.SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES


class AccessToken(BaseModel):
    """DTO for an issued access token."""

    access_token: str
    token_type: str
    expires_in: int


def create_access_token(username: str, role: Role) -> str:
    """Create an access token carrying the caller's role."""
    expire = datetime.now(UTC) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": username, "role": role.value, "exp": expire, "type": "access"}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> Principal | None:
    """Verify an access token and return its principal if valid."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        if payload.get("type") != "access":
            return None
        username = payload.get("sub")
        if not username:
            return None
        return Principal(username=username, role=Role(payload.get("role", Role.VIEWER.value)))
    except (InvalidTokenError, ValueError):
        return None


class TokenServiceAdapter:
    """Adapter exposing the token functions through TokenServiceProtocol."""

    def create_access_token(self, username: str, role: Role) -> AccessToken:
        return AccessToken(
            access_token=create_access_token(username, role),
            token_type="bearer",  # noqa: S106
            expires_in=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )

    def verify_access_token(self, token: str) -> Principal | None:
        return verify_access_token(token)
