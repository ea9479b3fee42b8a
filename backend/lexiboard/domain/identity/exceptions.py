"""Identity module domain exceptions."""

from lexiboard.domain.common.exceptions import AuthorizationError


class InvalidCredentialsError(AuthorizationError):
    """Raised when a username and password do not match."""

    def __init__(self) -> None:
        super().__init__("Incorrect username or password")
