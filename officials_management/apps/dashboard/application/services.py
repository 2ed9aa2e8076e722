import asyncio
import logging
from collections import Counter
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.utils import timezone

from officials_management.apps.dashboard.domain.models import DashboardMetrics, empty_status_counts
from officials_management.apps.officials.domain.exceptions import StoreError
from officials_management.apps.officials.domain.repositories import RecordStore
from officials_management.apps.officials.infrastructure.repositories import DjangoRecordStore

logger = logging.getLogger(__name__)


class DashboardMetricsAggregator:
    """
    Сборщик сводных показателей по служащим.

    Рассчитывает:
    - Количество служащих и распределение по статусам
    - Количество выданных доступов (ролей)
    - Суммарную стоимость закрепленного инвентаря
    - Невыполненные мероприятия в ближайшие N дней (строго после сегодня
      и строго до сегодня + N)

    Четыре чтения независимы и выполняются одновременно. Частичный результат
    не возвращается: при любой ошибке хранилища показатели нулевые.
    """

    def __init__(self, record_store: RecordStore = DjangoRecordStore(), window_days: Optional[int] = None):
        self.record_store = record_store
        self.window_days = (
            window_days if window_days is not None
            else getattr(settings, 'UPCOMING_EVENTS_WINDOW_DAYS', 30)
        )

    async def aggregate(self, now: Optional[datetime] = None) -> DashboardMetrics:
        if now is None:
            today = timezone.localdate()
        elif timezone.is_naive(now):
            today = now.date()
        else:
            today = timezone.localdate(now)
        window_end = today + timedelta(days=self.window_days)

        try:
            results = await asyncio.gather(
                self.record_store.list_official_statuses(),
                self.record_store.count_roles(),
                self.record_store.list_inventory_values(),
                self.record_store.count_pending_events(after=today, before=window_end),
                return_exceptions=True,
            )
            for result in results:
                if isinstance(result, BaseException):
                    raise result
        except StoreError as exc:
            logger.error("Ошибка при расчете сводных показателей", exc_info=True)
            return DashboardMetrics.empty(error=str(exc))
        statuses, roles_count, values, upcoming = results

        # неизвестные статусы не попадают ни в одну группу
        status_counts = empty_status_counts()
        for status, total in Counter(statuses).items():
            if status in status_counts:
                status_counts[status] = total

        return DashboardMetrics(
            officials_count=len(statuses),
            active_roles_count=roles_count or 0,
            total_inventory_value=sum((value or Decimal('0') for value in values), Decimal('0')),
            status_counts=status_counts,
            upcoming_events=upcoming or 0,
        )
