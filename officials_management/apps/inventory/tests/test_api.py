from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from officials_management.apps.inventory.models import InventoryItem
from tests.fixtures.factories import InventoryItemFactory, OfficialFactory, UserFactory


@pytest.mark.django_db
class TestInventoryAPI:
    def setup_method(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.client.force_authenticate(user=self.user)

    def test_create_item(self):
        official = OfficialFactory()

        response = self.client.post(
            reverse('inventory-item-list'),
            {'official_id': official.id, 'description': 'Ноутбук', 'code': 'INV-0001', 'value': '1500.50'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['official']['full_name'] == official.full_name
        assert InventoryItem.objects.get().value == Decimal('1500.50')

    def test_create_item_without_value(self):
        official = OfficialFactory()

        response = self.client.post(
            reverse('inventory-item-list'),
            {'official_id': official.id, 'description': 'Ноутбук', 'code': 'INV-0001'},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert InventoryItem.objects.count() == 0

    def test_create_item_unknown_official(self):
        response = self.client.post(
            reverse('inventory-item-list'),
            {'official_id': 9999, 'description': 'Ноутбук', 'code': 'INV-0001', 'value': '10'},
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_search(self):
        InventoryItemFactory(description='Ноутбук', code='INV-0001')
        InventoryItemFactory(description='Монитор', code='INV-0002')

        response = self.client.get(reverse('inventory-item-list'), {'search': 'INV-0002'})

        assert response.status_code == status.HTTP_200_OK
        assert [item['description'] for item in response.data] == ['Монитор']

    def test_list_for_official(self):
        item = InventoryItemFactory()
        InventoryItemFactory()

        response = self.client.get(reverse('inventory-item-list'), {'official': item.official_id})

        assert [i['id'] for i in response.data] == [item.id]

    def test_update_item(self):
        item = InventoryItemFactory()

        response = self.client.patch(
            reverse('inventory-item-detail', args=[item.id]), {'value': '2000.00'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        item.refresh_from_db()
        assert item.value == Decimal('2000.00')

    def test_delete_item(self):
        item = InventoryItemFactory()

        response = self.client.delete(reverse('inventory-item-detail', args=[item.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert InventoryItem.objects.count() == 0
