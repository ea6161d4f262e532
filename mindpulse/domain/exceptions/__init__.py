"""
Domain exceptions package.

Only PersistenceError raised by the primary save is meant to reach a caller;
scoring degradation is handled without exceptions and SyncError stays inside
background upload tasks.
"""

from mindpulse.domain.exceptions.base import DomainException
from mindpulse.domain.exceptions.persistence_exceptions import PersistenceError
from mindpulse.domain.exceptions.sync_exceptions import SyncError

__all__ = [
    "DomainException",
    "PersistenceError",
    "SyncError",
]
