# account_service/infra/jwt/flask_jwt_token_encryptor.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import cast

from account_service.services._shared.ports import TokenEncryptor


@dataclass(slots=True)
class JWTTokenEncryptor(TokenEncryptor):
    """
    Adapter for Flask-JWT-Extended access tokens.

    The subject (account id) becomes the ``sub`` claim; the signing key is
    ``JWT_SECRET_KEY``.

    .. note::
       Requires an active Flask app context with proper JWT settings.

    :param expires_delta: Lifetime of every issued token.
    """

    expires_delta: timedelta

    def encrypt(self, subject: str) -> str:
        from flask_jwt_extended import create_access_token

        return cast(
            str,
            create_access_token(identity=subject, expires_delta=self.expires_delta),
        )
