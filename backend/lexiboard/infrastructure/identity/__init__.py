"""Identity infrastructure layer."""

from lexiboard.infrastructure.identity.dependencies import (
    get_current_user,
    oauth2_scheme,
    require_admin,
)

__all__ = [
    "get_current_user",
    "oauth2_scheme",
    "require_admin",
]
