"""Use case for authentication operations."""

import secrets

import structlog

from lexiboard.application.identity.protocols.token_service import TokenServiceProtocol
from lexiboard.domain.identity.entities.principal import Principal, Role
from lexiboard.domain.identity.exceptions import InvalidCredentialsError
from lexiboard.infrastructure.identity.services.token_service import AccessToken

logger = structlog.get_logger(__name__)


class AuthenticationUseCase:
    """Use case for authentication operations.

    The catalog has a single administrator account configured through
    settings; everyone else reads anonymously.
    """

    def __init__(
        self,
        admin_username: str,
        admin_password: str,
        token_service: TokenServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.admin_username = admin_username
        self.admin_password = admin_password
        self.token_service = token_service

    def authenticate(self, username: str, password: str) -> tuple[Principal, AccessToken]:
        """
        Authenticate with username and password.

        Returns:
            Tuple of (principal, access token)

        Raises:
            InvalidCredentialsError: If credentials are invalid
        """
        # Compare both fields so the timing does not reveal which one was wrong
        username_ok = secrets.compare_digest(username.encode(), self.admin_username.encode())
        password_ok = secrets.compare_digest(password.encode(), self.admin_password.encode())
        if not (username_ok and password_ok) or not self.admin_password:
            logger.warning("login_failed", username=username)
            raise InvalidCredentialsError

        principal = Principal(username=username, role=Role.ADMIN)
        token = self.token_service.create_access_token(principal.username, principal.role)

        logger.info("user_authenticated", username=username)
        return principal, token

    def resolve_token(self, token: str) -> Principal | None:
        """Return the principal an access token was issued to, or None if it is invalid."""
        return self.token_service.verify_access_token(token)
