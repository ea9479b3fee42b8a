from .token_service import AccessToken, TokenServiceAdapter

__all__ = [
    "AccessToken",
    "TokenServiceAdapter",
]
