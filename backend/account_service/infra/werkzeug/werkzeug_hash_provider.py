# account_service/infra/werkzeug/werkzeug_hash_provider.py
from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from account_service.services._shared.ports import HashProvider


@dataclass(slots=True)
class WerkzeugHashProvider(HashProvider):
    """
    Salted password hashing through :mod:`werkzeug.security`.

    :param method: Werkzeug method name, e.g. ``"pbkdf2:sha256"`` or ``"scrypt"``.
    :param iterations: PBKDF2 cost factor appended to the method. Ignored for
        non-PBKDF2 methods and when the method already names a count.
    :param salt_length: Random salt length in characters.
    """

    method: str = "pbkdf2:sha256"
    iterations: int | None = 600_000
    salt_length: int = 16

    def method_spec(self) -> str:
        parts = self.method.split(":")
        if parts[0] == "pbkdf2" and len(parts) == 2 and self.iterations:
            return f"{self.method}:{self.iterations}"
        return self.method

    def hash(self, plain: str) -> str:
        return generate_password_hash(plain, method=self.method_spec(), salt_length=self.salt_length)

    def compare(self, plain: str, hashed: str) -> bool:
        # ``check_password_hash`` is untyped; coerce for mypy
        return bool(check_password_hash(hashed, plain))
