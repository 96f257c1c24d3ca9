"""Unit of Work abstractions and the SQLAlchemy implementation.

The SQLAlchemy store adapters open one unit of work per call; use cases never
see it.
"""

from .base import UnitOfWork
from .sqlalchemy_uow import SQLAlchemyUnitOfWork

__all__ = ["SQLAlchemyUnitOfWork", "UnitOfWork"]
