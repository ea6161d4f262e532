from mindpulse.domain.entities.assessment import Assessment, InputType, RiskLevel
from mindpulse.domain.entities.user import DataStoragePreference, User

__all__ = [
    "Assessment",
    "DataStoragePreference",
    "InputType",
    "RiskLevel",
    "User",
]
