from unittest.mock import Mock

import pytest

from officials_management.apps.officials.domain.exceptions import NotFoundError, StoreError, ValidationError
from officials_management.apps.officials.domain.repositories import RecordStore
from officials_management.apps.officials.models import Official
from officials_management.apps.systems.application.services import SystemApplicationService
from officials_management.apps.systems.models import SystemInfo


@pytest.mark.asyncio
class TestSystemApplicationService:
    async def test_add_system_requires_name(self):
        store = Mock(spec=RecordStore)
        service = SystemApplicationService(record_store=store)

        with pytest.raises(ValidationError):
            await service.add_system(name='   ')

        store.add_system.assert_not_called()

    async def test_add_system(self):
        store = Mock(spec=RecordStore)
        store.add_system.side_effect = lambda system: system
        service = SystemApplicationService(record_store=store)

        system = await service.add_system(name=' СЭД ', description='Документооборот')

        assert system.name == 'СЭД'
        store.add_system.assert_called_once()

    async def test_grant_role(self):
        """Роль выдается только существующему служащему на существующую систему"""
        store = Mock(spec=RecordStore)
        store.get_official.return_value = Official(id=1, full_name='Иванов Иван')
        store.get_system.return_value = SystemInfo(id=2, name='СЭД')
        store.add_role.side_effect = lambda role: role
        service = SystemApplicationService(record_store=store)

        role = await service.grant_role(1, 2)

        assert role.official_id == 1
        assert role.system_id == 2
        assert role.granted_at is not None

    async def test_grant_role_unknown_system(self):
        store = Mock(spec=RecordStore)
        store.get_official.return_value = Official(id=1)
        store.get_system.side_effect = NotFoundError('Система', 2)
        service = SystemApplicationService(record_store=store)

        with pytest.raises(NotFoundError):
            await service.grant_role(1, 2)

        store.add_role.assert_not_called()

    async def test_delete_system_failure_propagates(self):
        store = Mock(spec=RecordStore)
        store.delete_system.side_effect = StoreError('protected')
        service = SystemApplicationService(record_store=store)

        with pytest.raises(StoreError):
            await service.delete_system(2)

    async def test_update_system_ignores_unknown_fields(self):
        store = Mock(spec=RecordStore)
        store.get_system.return_value = SystemInfo(id=2, name='СЭД')
        service = SystemApplicationService(record_store=store)

        await service.update_system(2, description='Новая', id=99)

        store.update_system.assert_called_once_with(2, description='Новая')
