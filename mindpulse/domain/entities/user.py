"""
User reference as seen by the assessment engine.
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class DataStoragePreference(str, Enum):
    """Per-user data-sharing policy."""

    SERVER = "server"  # full record uploaded
    HYBRID = "hybrid"  # anonymized numeric fields uploaded, sensitive data stays local
    LOCAL = "local"  # nothing leaves the device


@dataclass(frozen=True)
class User:
    """Read-only user reference. The engine never mutates it."""

    id: UUID
    data_storage_preference: DataStoragePreference = DataStoragePreference.LOCAL
