from dataclasses import dataclass, field
from datetime import date
from typing import List


@dataclass(frozen=True)
class ScheduledEvent:
    event_type: str
    scheduled_date: date

    def __str__(self):
        return f"{self.event_type} @ {self.scheduled_date.isoformat()}"


@dataclass(frozen=True)
class OfficialRecords:
    """Срез всех коллекций (опционально по одному служащему)"""
    officials: List = field(default_factory=list)
    roles: List = field(default_factory=list)
    inventory: List = field(default_factory=list)
    events: List = field(default_factory=list)
