import logging
from typing import List, Optional

from django.utils import timezone

from officials_management.apps.officials.domain.exceptions import StoreError, ValidationError
from officials_management.apps.officials.domain.repositories import RecordStore
from officials_management.apps.officials.infrastructure.repositories import DjangoRecordStore
from officials_management.apps.systems.models import OfficialRole, SystemInfo

logger = logging.getLogger(__name__)


class SystemApplicationService:
    """
    Сервис для управления информационными системами и доступами служащих.
    """
    def __init__(self, record_store: RecordStore = DjangoRecordStore()):
        self.record_store = record_store

    async def list_systems(self) -> List[SystemInfo]:
        return await self.record_store.list_systems()

    async def get_system(self, system_id: int) -> SystemInfo:
        return await self.record_store.get_system(system_id)

    async def add_system(self, name: str, description: str = "") -> SystemInfo:
        if not name or not name.strip():
            raise ValidationError({'name': 'Название системы обязательно.'})
        try:
            system = await self.record_store.add_system(
                SystemInfo(name=name.strip(), description=description or "")
            )
        except StoreError:
            logger.error(f"Ошибка при создании системы '{name}'", exc_info=True)
            raise
        logger.info(f"Создана система {system.id} ({system.name})")
        return system

    async def update_system(self, system_id: int, **changes) -> SystemInfo:
        fields = {key: value for key, value in changes.items() if key in ('name', 'description')}
        if 'name' in fields and (not fields['name'] or not fields['name'].strip()):
            raise ValidationError({'name': 'Название системы обязательно.'})
        if fields:
            try:
                await self.record_store.update_system(system_id, **fields)
            except StoreError:
                logger.error(f"Ошибка при обновлении системы {system_id}", exc_info=True)
                raise
        return await self.record_store.get_system(system_id)

    async def delete_system(self, system_id: int) -> None:
        try:
            await self.record_store.delete_system(system_id)
        except StoreError:
            # система с выданными ролями защищена от удаления
            logger.error(f"Ошибка при удалении системы {system_id}", exc_info=True)
            raise
        logger.info(f"Система {system_id} удалена")

    async def list_roles(self, official_id: Optional[int] = None) -> List[OfficialRole]:
        return await self.record_store.list_roles(official_id)

    async def grant_role(self, official_id: int, system_id: int) -> OfficialRole:
        """
        Выдача служащему доступа к системе

        Raises:
            NotFoundError: Служащий или система не найдены
            StoreError: Ошибка записи
        """
        official = await self.record_store.get_official(official_id)
        system = await self.record_store.get_system(system_id)
        role = OfficialRole(official=official, system=system, granted_at=timezone.now())
        try:
            role = await self.record_store.add_role(role)
        except StoreError:
            logger.error(f"Ошибка при выдаче роли служащему {official_id}", exc_info=True)
            raise
        logger.info(f"Служащему {official_id} выдан доступ к системе {system.name}")
        return role

    async def revoke_role(self, role_id: int) -> None:
        try:
            await self.record_store.delete_role(role_id)
        except StoreError:
            logger.error(f"Ошибка при удалении роли {role_id}", exc_info=True)
            raise
        logger.info(f"Роль {role_id} удалена")
