import datetime
from decimal import Decimal

import factory
from django.contrib.auth.models import User
from factory.django import DjangoModelFactory

from officials_management.apps.inventory.models import InventoryItem
from officials_management.apps.officials.models import Official, OfficialEvent
from officials_management.apps.systems.models import OfficialRole, SystemInfo


class UserFactory(DjangoModelFactory):
    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f'user{n}')
    email = factory.LazyAttribute(lambda o: f'{o.username}@example.com')
    password = factory.PostGenerationMethodCall('set_password', 'password')


class OfficialFactory(DjangoModelFactory):
    class Meta:
        model = Official

    full_name = factory.Sequence(lambda n: f'Служащий {n}')
    age = 35
    document_id = factory.Sequence(lambda n: f'DOC{n:05d}')
    position = 'Инспектор'
    profession = 'Юрист'
    procedure = 'Конкурс'
    status = Official.EmploymentStatus.PROVISIONAL
    entry_date = datetime.date(2024, 1, 15)


class OfficialEventFactory(DjangoModelFactory):
    class Meta:
        model = OfficialEvent

    official = factory.SubFactory(OfficialFactory)
    event_type = OfficialEvent.EventType.ANNUAL_EVALUATION
    scheduled_date = datetime.date(2025, 1, 15)
    completed = False
    origin = 'create'


class SystemInfoFactory(DjangoModelFactory):
    class Meta:
        model = SystemInfo
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f'System {n}')
    description = 'Информационная система'


class OfficialRoleFactory(DjangoModelFactory):
    class Meta:
        model = OfficialRole

    official = factory.SubFactory(OfficialFactory)
    system = factory.SubFactory(SystemInfoFactory)


class InventoryItemFactory(DjangoModelFactory):
    class Meta:
        model = InventoryItem

    official = factory.SubFactory(OfficialFactory)
    description = 'Ноутбук'
    code = factory.Sequence(lambda n: f'INV-{n:04d}')
    value = Decimal('1000.00')
