from account_service.models.account import AccountModel
from account_service.models.refresh_token import RefreshTokenModel

__all__ = [
    "AccountModel",
    "RefreshTokenModel",
]
