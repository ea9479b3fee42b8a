from typing import Protocol

from lexiboard.domain.identity.entities.principal import Principal, Role
from lexiboard.infrastructure.identity.services.token_service import AccessToken


class TokenServiceProtocol(Protocol):
    def create_access_token(self, username: str, role: Role) -> AccessToken: ...

    def verify_access_token(self, token: str) -> Principal | None: ...
