"""The authenticated caller of the catalog API."""

from dataclasses import dataclass
from enum import StrEnum


class Role(StrEnum):
    """Roles carried in access tokens."""

    ADMIN = "admin"
    VIEWER = "viewer"


@dataclass(frozen=True)
class Principal:
    """Identity resolved from an access token."""

    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN
