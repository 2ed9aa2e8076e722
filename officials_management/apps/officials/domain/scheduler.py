"""
Расчет обязательных мероприятий служащего по дате поступления и статусу.

Чистая функция: без обращения к хранилищу, детерминированная, без ошибок.
Смещения считаются календарными месяцами (dateutil.relativedelta), поэтому
31 января + 1 месяц = последний день февраля.
"""
from datetime import date, datetime
from typing import Dict, List, Tuple

from dateutil.relativedelta import relativedelta

from officials_management.apps.officials.domain.value_objects import ScheduledEvent
from officials_management.apps.officials.models import Official, OfficialEvent

EmploymentStatus = Official.EmploymentStatus
EventType = OfficialEvent.EventType

# Статус -> (тип мероприятия, смещение в месяцах), по возрастанию смещения
EVENT_RULES: Dict[str, Tuple[Tuple[str, int], ...]] = {
    EmploymentStatus.POSITIONED: (
        (EventType.FOLLOW_UP, 3),
        (EventType.TRIAL_PERIOD_EVALUATION, 6),
        (EventType.ANNUAL_EVALUATION, 12),
    ),
    EmploymentStatus.PROVISIONAL: (
        (EventType.ANNUAL_EVALUATION, 12),
    ),
    EmploymentStatus.INACTIVE: (),
    EmploymentStatus.FOLLOW_UP: (),
}


def schedule_events(entry_date: date, status: str) -> List[ScheduledEvent]:
    """
    Список мероприятий, обязательных для служащего с данным статусом.

    Args:
        entry_date: Дата поступления (datetime усекается до даты)
        status: Статус служащего

    Returns:
        List[ScheduledEvent]: Мероприятия в порядке возрастания даты;
        пустой список для статусов без мероприятий
    """
    if isinstance(entry_date, datetime):
        entry_date = entry_date.date()

    return [
        ScheduledEvent(
            event_type=event_type,
            scheduled_date=entry_date + relativedelta(months=months),
        )
        for event_type, months in EVENT_RULES.get(status, ())
    ]
