import datetime

import pytest

from officials_management.apps.officials.domain.scheduler import schedule_events
from officials_management.apps.officials.domain.value_objects import ScheduledEvent
from officials_management.apps.officials.models import Official, OfficialEvent

Status = Official.EmploymentStatus
EventType = OfficialEvent.EventType


class TestScheduleEvents:
    def test_positioned_gets_three_events(self):
        """Назначенный служащий: контроль через 3, испытательный срок через 6, ежегодная оценка через 12 месяцев"""
        events = schedule_events(datetime.date(2024, 1, 15), Status.POSITIONED)

        assert events == [
            ScheduledEvent(EventType.FOLLOW_UP, datetime.date(2024, 4, 15)),
            ScheduledEvent(EventType.TRIAL_PERIOD_EVALUATION, datetime.date(2024, 7, 15)),
            ScheduledEvent(EventType.ANNUAL_EVALUATION, datetime.date(2025, 1, 15)),
        ]

    def test_provisional_gets_annual_evaluation_only(self):
        events = schedule_events(datetime.date(2024, 1, 15), Status.PROVISIONAL)

        assert events == [ScheduledEvent(EventType.ANNUAL_EVALUATION, datetime.date(2025, 1, 15))]

    @pytest.mark.parametrize('status', [Status.INACTIVE, Status.FOLLOW_UP, 'UNKNOWN'])
    def test_no_events_for_other_statuses(self, status):
        assert schedule_events(datetime.date(2024, 1, 15), status) == []

    def test_month_end_is_clamped(self):
        """31 января + 3 месяца = 30 апреля"""
        events = schedule_events(datetime.date(2024, 1, 31), Status.POSITIONED)

        assert [event.scheduled_date for event in events] == [
            datetime.date(2024, 4, 30),
            datetime.date(2024, 7, 31),
            datetime.date(2025, 1, 31),
        ]

    def test_leap_day(self):
        events = schedule_events(datetime.date(2024, 2, 29), Status.PROVISIONAL)

        assert events[0].scheduled_date == datetime.date(2025, 2, 28)

    def test_datetime_is_truncated_to_date(self):
        events = schedule_events(datetime.datetime(2024, 1, 15, 17, 45), Status.PROVISIONAL)

        assert events[0].scheduled_date == datetime.date(2025, 1, 15)
        assert type(events[0].scheduled_date) is datetime.date

    def test_dates_are_after_entry_and_ascending(self):
        entry = datetime.date(2023, 11, 30)
        events = schedule_events(entry, Status.POSITIONED)
        dates = [event.scheduled_date for event in events]

        assert all(d > entry for d in dates)
        assert dates == sorted(dates)

    def test_is_deterministic(self):
        entry = datetime.date(2024, 6, 1)

        assert schedule_events(entry, Status.POSITIONED) == schedule_events(entry, Status.POSITIONED)
