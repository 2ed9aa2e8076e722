from decimal import Decimal
from unittest.mock import Mock

import pytest

from officials_management.apps.inventory.application.services import InventoryApplicationService
from officials_management.apps.officials.domain.exceptions import NotFoundError, ValidationError
from officials_management.apps.officials.domain.repositories import RecordStore
from officials_management.apps.officials.models import Official


@pytest.mark.asyncio
class TestInventoryApplicationService:
    async def test_add_item(self):
        store = Mock(spec=RecordStore)
        store.get_official.return_value = Official(id=1, full_name='Иванов Иван')
        store.add_inventory_item.side_effect = lambda item: item
        service = InventoryApplicationService(record_store=store)

        item = await service.add_item(1, 'Ноутбук', 'INV-0001', '1500.50')

        assert item.official_id == 1
        assert item.value == Decimal('1500.50')

    async def test_add_item_missing_fields(self):
        store = Mock(spec=RecordStore)
        service = InventoryApplicationService(record_store=store)

        with pytest.raises(ValidationError) as exc_info:
            await service.add_item(None, '', 'INV-0001', None)

        assert set(exc_info.value.message_dict) == {'official', 'description', 'value'}
        assert store.mock_calls == []

    async def test_add_item_bad_value(self):
        store = Mock(spec=RecordStore)
        service = InventoryApplicationService(record_store=store)

        with pytest.raises(ValidationError):
            await service.add_item(1, 'Ноутбук', 'INV-0001', 'дорого')

        assert store.mock_calls == []

    async def test_add_item_unknown_official(self):
        store = Mock(spec=RecordStore)
        store.get_official.side_effect = NotFoundError('Служащий', 1)
        service = InventoryApplicationService(record_store=store)

        with pytest.raises(NotFoundError):
            await service.add_item(1, 'Ноутбук', 'INV-0001', 100)

        store.add_inventory_item.assert_not_called()

    async def test_update_item_cannot_reassign(self):
        """Служащий, за которым закреплен инвентарь, через обновление не меняется"""
        store = Mock(spec=RecordStore)
        service = InventoryApplicationService(record_store=store)

        await service.update_item(5, code='INV-0002', official_id=99)

        store.update_inventory_item.assert_called_once_with(5, code='INV-0002')
