import datetime
from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from officials_management.apps.officials.domain.exceptions import StoreError
from officials_management.apps.officials.infrastructure.repositories import DjangoRecordStore
from officials_management.apps.officials.models import Official
from tests.fixtures.factories import (
    InventoryItemFactory,
    OfficialEventFactory,
    OfficialFactory,
    OfficialRoleFactory,
    UserFactory,
)

Status = Official.EmploymentStatus


@pytest.mark.django_db
class TestDashboardMetricsAPI:
    def setup_method(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.client.force_authenticate(user=self.user)

    def test_metrics(self):
        today = timezone.localdate()
        positioned = OfficialFactory(status=Status.POSITIONED)
        OfficialFactory(status=Status.INACTIVE)
        OfficialRoleFactory(official=positioned)
        InventoryItemFactory(official=positioned, value=Decimal('250.00'))
        InventoryItemFactory(official=positioned, value=None)
        OfficialEventFactory(official=positioned, scheduled_date=today + datetime.timedelta(days=5))
        OfficialEventFactory(official=positioned, scheduled_date=today)
        OfficialEventFactory(official=positioned, scheduled_date=today + datetime.timedelta(days=60))

        response = self.client.get(reverse('dashboard-metrics'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['officials_count'] == 2
        assert response.data['status_counts']['POSITIONED'] == 1
        assert response.data['status_counts']['INACTIVE'] == 1
        assert response.data['active_roles_count'] == 1
        assert response.data['total_inventory_value'] == '250.00'
        assert response.data['upcoming_events'] == 1
        assert response.data['error'] is None

    def test_metrics_on_store_failure(self, mocker):
        mocker.patch.object(DjangoRecordStore, 'count_roles', side_effect=StoreError('read failed'))

        response = self.client.get(reverse('dashboard-metrics'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['officials_count'] == 0
        assert response.data['error']


@pytest.mark.django_db
class TestDashboardMetricsCommand:
    def test_prints_metrics(self):
        official = OfficialFactory(status=Status.POSITIONED)
        OfficialEventFactory(official=official, scheduled_date=datetime.date(2024, 6, 10))
        out = StringIO()

        call_command('dashboard_metrics', '--date', '2024-06-01', stdout=out)

        output = out.getvalue()
        assert 'Служащих: 1' in output
        assert 'Мероприятий в ближайшие дни: 1' in output

    def test_bad_date(self):
        with pytest.raises(CommandError):
            call_command('dashboard_metrics', '--date', '01.06.2024', stdout=StringIO())

    def test_store_failure(self, mocker):
        mocker.patch.object(DjangoRecordStore, 'count_roles', side_effect=StoreError('read failed'))

        with pytest.raises(CommandError):
            call_command('dashboard_metrics', stdout=StringIO())
