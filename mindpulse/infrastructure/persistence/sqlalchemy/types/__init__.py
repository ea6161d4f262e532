"""
SQLAlchemy custom types package.
"""

from mindpulse.infrastructure.persistence.sqlalchemy.types.guid import GUID

__all__ = ["GUID"]
