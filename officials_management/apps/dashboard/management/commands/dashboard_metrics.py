"""
Management команда для вывода сводных показателей по служащим

Использование:
    python manage.py dashboard_metrics
    python manage.py dashboard_metrics --date 2025-11-17
"""
from datetime import date, datetime, time

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from officials_management.apps.dashboard.application.services import DashboardMetricsAggregator
from officials_management.apps.officials.models import Official


class Command(BaseCommand):
    help = 'Сводные показатели: служащие по статусам, доступы, инвентарь, ближайшие мероприятия'

    def add_arguments(self, parser):
        parser.add_argument(
            '--date',
            type=str,
            help='Дата расчета в формате YYYY-MM-DD (по умолчанию - сегодня)',
        )

    def handle(self, *args, **options):
        now = None
        if options['date']:
            try:
                target_date = date.fromisoformat(options['date'])
            except ValueError:
                raise CommandError(f"Неверный формат даты: {options['date']}. Используйте YYYY-MM-DD")
            now = timezone.make_aware(datetime.combine(target_date, time.min))

        metrics = async_to_sync(DashboardMetricsAggregator().aggregate)(now=now)

        if metrics.error:
            raise CommandError(f"Ошибка при расчете показателей: {metrics.error}")

        self.stdout.write(f"Служащих: {metrics.officials_count}")
        for status, label in Official.EmploymentStatus.choices:
            self.stdout.write(f"  - {label}: {metrics.status_counts[status]}")
        self.stdout.write(f"Выданных доступов: {metrics.active_roles_count}")
        self.stdout.write(f"Стоимость инвентаря: {metrics.total_inventory_value}")
        self.stdout.write(
            self.style.SUCCESS(f"Мероприятий в ближайшие дни: {metrics.upcoming_events}")
        )
