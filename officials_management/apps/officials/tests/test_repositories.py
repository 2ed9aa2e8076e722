import datetime
from decimal import Decimal

import pytest
from asgiref.sync import async_to_sync
from django.db import DatabaseError, InterfaceError

from officials_management.apps.inventory.models import InventoryItem
from officials_management.apps.officials.application.services import OfficialLifecycleService
from officials_management.apps.officials.domain.exceptions import EventSchedulingError, NotFoundError, StoreError
from officials_management.apps.officials.infrastructure.repositories import DjangoRecordStore, store_operation
from officials_management.apps.officials.models import Official, OfficialEvent
from officials_management.apps.systems.models import OfficialRole
from tests.fixtures.factories import (
    InventoryItemFactory,
    OfficialEventFactory,
    OfficialFactory,
    OfficialRoleFactory,
)

Status = Official.EmploymentStatus


@pytest.mark.django_db
class TestDjangoRecordStore:
    def setup_method(self):
        self.store = DjangoRecordStore()

    def test_get_unknown_official(self):
        with pytest.raises(NotFoundError):
            async_to_sync(self.store.get_official)(12345)

    def test_update_unknown_official(self):
        with pytest.raises(NotFoundError):
            async_to_sync(self.store.update_official)(12345, status=Status.INACTIVE)

    def test_delete_unknown_official_is_noop(self):
        async_to_sync(self.store.delete_official)(12345)

    def test_list_officials_filters(self):
        OfficialFactory(full_name='Иванов Иван', status=Status.POSITIONED, procedure='Конкурс')
        OfficialFactory(full_name='Петров Петр', status=Status.PROVISIONAL, procedure='Перевод')

        by_search = async_to_sync(self.store.list_officials)(search='Иванов')
        by_status = async_to_sync(self.store.list_officials)(status=Status.PROVISIONAL)
        by_procedure = async_to_sync(self.store.list_officials)(procedure='Конкурс')

        assert [o.full_name for o in by_search] == ['Иванов Иван']
        assert [o.full_name for o in by_status] == ['Петров Петр']
        assert [o.full_name for o in by_procedure] == ['Иванов Иван']

    def test_list_procedures_is_distinct(self):
        OfficialFactory(procedure='Конкурс')
        OfficialFactory(procedure='Конкурс')
        OfficialFactory(procedure='Перевод')

        assert async_to_sync(self.store.list_procedures)() == ['Конкурс', 'Перевод']

    def test_count_pending_events_uses_strict_bounds(self):
        official = OfficialFactory()
        today = datetime.date(2024, 6, 1)
        OfficialEventFactory(official=official, scheduled_date=today)
        OfficialEventFactory(official=official, scheduled_date=today + datetime.timedelta(days=1))
        OfficialEventFactory(official=official, scheduled_date=today + datetime.timedelta(days=29))
        OfficialEventFactory(official=official, scheduled_date=today + datetime.timedelta(days=30))
        OfficialEventFactory(
            official=official, scheduled_date=today + datetime.timedelta(days=2), completed=True
        )

        count = async_to_sync(self.store.count_pending_events)(
            after=today, before=today + datetime.timedelta(days=30)
        )

        assert count == 2

    def test_inventory_values_include_null(self):
        InventoryItemFactory(value=Decimal('10.50'))
        InventoryItemFactory(value=None)

        values = async_to_sync(self.store.list_inventory_values)()

        assert sorted(values, key=lambda v: v or Decimal('0')) == [None, Decimal('10.50')]


@pytest.mark.django_db
class TestLifecycleIntegration:
    def setup_method(self):
        self.service = OfficialLifecycleService(record_store=DjangoRecordStore())

    def test_create_persists_official_and_events(self):
        official_id = async_to_sync(self.service.create_official)(
            full_name='Иванов Иван',
            document_id='DOC001',
            position='Инспектор',
            procedure='Конкурс',
            status=Status.POSITIONED,
            entry_date='2024-01-15',
        )

        official = Official.objects.get(pk=official_id)
        assert official.status == Status.POSITIONED
        assert list(
            OfficialEvent.objects.filter(official=official).values_list('event_type', 'scheduled_date')
        ) == [
            (OfficialEvent.EventType.FOLLOW_UP, datetime.date(2024, 4, 15)),
            (OfficialEvent.EventType.TRIAL_PERIOD_EVALUATION, datetime.date(2024, 7, 15)),
            (OfficialEvent.EventType.ANNUAL_EVALUATION, datetime.date(2025, 1, 15)),
        ]

    def test_promotion_adds_events_again_on_repeat(self):
        """Повторный переход PROVISIONAL -> POSITIONED снова добавляет мероприятия"""
        official = OfficialFactory(status=Status.PROVISIONAL)

        async_to_sync(self.service.change_status)(official.id, Status.POSITIONED)
        async_to_sync(self.service.change_status)(official.id, Status.PROVISIONAL)
        async_to_sync(self.service.change_status)(official.id, Status.POSITIONED)

        events = OfficialEvent.objects.filter(official=official)
        assert events.count() == 6
        assert set(events.values_list('origin', flat=True)) == {'PROVISIONAL->POSITIONED'}

    def test_delete_removes_all_dependents(self):
        official = OfficialFactory()
        other = OfficialFactory()
        OfficialRoleFactory(official=official)
        InventoryItemFactory(official=official)
        OfficialEventFactory(official=official)
        OfficialEventFactory(official=other)

        async_to_sync(self.service.delete_official)(official.id)

        assert not Official.objects.filter(pk=official.id).exists()
        assert not OfficialRole.objects.filter(official_id=official.id).exists()
        assert not InventoryItem.objects.filter(official_id=official.id).exists()
        assert not OfficialEvent.objects.filter(official_id=official.id).exists()
        assert OfficialEvent.objects.filter(official=other).count() == 1

    def test_list_for_single_official(self):
        official = OfficialFactory()
        OfficialRoleFactory(official=official)
        InventoryItemFactory(official=official)
        OfficialEventFactory(official=official)
        InventoryItemFactory()

        records = async_to_sync(self.service.list_for)(official.id)

        assert [o.id for o in records.officials] == [official.id]
        assert len(records.roles) == 1
        assert records.roles[0].system.name
        assert len(records.inventory) == 1
        assert len(records.events) == 1

    def test_event_failure_leaves_official(self, mocker):
        mocker.patch.object(
            DjangoRecordStore,
            'add_events',
            side_effect=EventSchedulingError(0),
        )

        with pytest.raises(EventSchedulingError) as exc_info:
            async_to_sync(self.service.create_official)(
                full_name='Иванов Иван',
                document_id='DOC001',
                position='Инспектор',
                procedure='Конкурс',
                status=Status.PROVISIONAL,
                entry_date=datetime.date(2024, 1, 15),
            )

        official_id = exc_info.value.official_id
        assert Official.objects.filter(pk=official_id).exists()
        assert not OfficialEvent.objects.filter(official_id=official_id).exists()


@pytest.mark.asyncio
class TestStoreOperation:
    @pytest.mark.parametrize('error', [
        DatabaseError('disk full'),
        InterfaceError('connection already closed'),
    ])
    async def test_database_errors_become_store_error(self, error):
        @store_operation('проверка')
        async def failing():
            raise error

        with pytest.raises(StoreError) as exc_info:
            await failing()

        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error

    async def test_closed_connection_on_read(self, mocker):
        mocker.patch.object(
            Official.objects, 'aget', side_effect=InterfaceError('connection already closed')
        )

        with pytest.raises(StoreError):
            await DjangoRecordStore().get_official(1)
