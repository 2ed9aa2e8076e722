"""
Таблица переходов статуса служащего.

Разрешены все переходы между четырьмя статусами (включая переход в тот же
статус), ни один статус не является конечным. Переход может нести побочное
действие; новые действия добавляются в таблицу, а не в код сервиса.
"""
import enum
from itertools import product
from typing import Dict, Optional, Tuple

from officials_management.apps.officials.models import Official

EmploymentStatus = Official.EmploymentStatus


class TransitionEffect(enum.Enum):
    SCHEDULE_POSITIONED_EVENTS = 'schedule_positioned_events'


TRANSITIONS: Dict[Tuple[str, str], Optional[TransitionEffect]] = {
    pair: None for pair in product(EmploymentStatus.values, repeat=2)
}
TRANSITIONS[(EmploymentStatus.PROVISIONAL, EmploymentStatus.POSITIONED)] = (
    TransitionEffect.SCHEDULE_POSITIONED_EVENTS
)


def transition_effect(old_status: str, new_status: str) -> Optional[TransitionEffect]:
    """Побочное действие перехода old_status -> new_status (None, если его нет)"""
    return TRANSITIONS.get((old_status, new_status))


def transition_label(old_status: str, new_status: str) -> str:
    return f"{old_status}->{new_status}"
