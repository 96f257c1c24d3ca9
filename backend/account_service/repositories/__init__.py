from account_service.repositories.account import AccountRepository
from account_service.repositories.refresh_token import RefreshTokenRepository

__all__ = [
    "AccountRepository",
    "RefreshTokenRepository",
]
