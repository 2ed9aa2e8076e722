from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Dict, Optional

from officials_management.apps.officials.models import Official


def empty_status_counts() -> Dict[str, int]:
    return {status: 0 for status in Official.EmploymentStatus.values}


@dataclass(frozen=True)
class DashboardMetrics:
    """
    Сводные показатели для главной страницы.

    Не хранится в БД. При ошибке чтения все показатели нулевые,
    а текст ошибки записан в ``error``.
    """
    officials_count: int = 0
    active_roles_count: int = 0
    total_inventory_value: Decimal = Decimal('0')
    status_counts: Dict[str, int] = field(default_factory=empty_status_counts)
    upcoming_events: int = 0
    error: Optional[str] = None

    @classmethod
    def empty(cls, error: Optional[str] = None) -> 'DashboardMetrics':
        return cls(error=error)

    def to_dict(self) -> dict:
        return asdict(self)
