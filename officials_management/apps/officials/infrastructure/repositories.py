import functools
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from django.db import Error
from django.db.models import Q

from officials_management.apps.inventory.models import InventoryItem
from officials_management.apps.officials.domain.exceptions import NotFoundError, StoreError
from officials_management.apps.officials.domain.repositories import RecordStore
from officials_management.apps.officials.models import Official, OfficialEvent
from officials_management.apps.systems.models import OfficialRole, SystemInfo


def store_operation(description: str):
    """Переводит ошибки БД в StoreError с сохранением исходной причины"""
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Error as exc:
                raise StoreError(f"Ошибка хранилища ({description})", exc) from exc
        return wrapper
    return decorator


class DjangoRecordStore(RecordStore):
    """
    Конкретная реализация хранилища на асинхронном Django ORM.
    """

    # officials
    @store_operation('список служащих')
    async def list_officials(
        self,
        official_id: Optional[int] = None,
        search: Optional[str] = None,
        status: Optional[str] = None,
        procedure: Optional[str] = None,
    ) -> List[Official]:
        qs = Official.objects.all()
        if official_id is not None:
            qs = qs.filter(pk=official_id)
        if search:
            qs = qs.filter(
                Q(full_name__icontains=search) |
                Q(document_id__icontains=search) |
                Q(position__icontains=search)
            )
        if status:
            qs = qs.filter(status=status)
        if procedure:
            qs = qs.filter(procedure=procedure)
        return [official async for official in qs.order_by('full_name')]

    @store_operation('чтение служащего')
    async def get_official(self, official_id: int) -> Official:
        try:
            return await Official.objects.aget(pk=official_id)
        except Official.DoesNotExist:
            raise NotFoundError('Служащий', official_id)

    @store_operation('создание служащего')
    async def add_official(self, official: Official) -> Official:
        await official.asave()
        return official

    @store_operation('обновление служащего')
    async def update_official(self, official_id: int, **fields) -> None:
        updated = await Official.objects.filter(pk=official_id).aupdate(**fields)
        if not updated:
            raise NotFoundError('Служащий', official_id)

    @store_operation('удаление служащего')
    async def delete_official(self, official_id: int) -> None:
        await Official.objects.filter(pk=official_id).adelete()

    @store_operation('статусы служащих')
    async def list_official_statuses(self) -> List[str]:
        return [status async for status in Official.objects.order_by().values_list('status', flat=True)]

    @store_operation('процедуры назначения')
    async def list_procedures(self) -> List[str]:
        qs = Official.objects.order_by('procedure').values_list('procedure', flat=True).distinct()
        return [procedure async for procedure in qs]

    # official_roles
    @store_operation('список ролей')
    async def list_roles(self, official_id: Optional[int] = None) -> List[OfficialRole]:
        qs = OfficialRole.objects.select_related('system')
        if official_id is not None:
            qs = qs.filter(official_id=official_id)
        return [role async for role in qs]

    @store_operation('чтение роли')
    async def get_role(self, role_id: int) -> OfficialRole:
        try:
            return await OfficialRole.objects.select_related('system').aget(pk=role_id)
        except OfficialRole.DoesNotExist:
            raise NotFoundError('Роль', role_id)

    @store_operation('выдача роли')
    async def add_role(self, role: OfficialRole) -> OfficialRole:
        await role.asave()
        return role

    @store_operation('удаление роли')
    async def delete_role(self, role_id: int) -> None:
        await OfficialRole.objects.filter(pk=role_id).adelete()

    @store_operation('удаление ролей служащего')
    async def delete_roles_for(self, official_id: int) -> None:
        await OfficialRole.objects.filter(official_id=official_id).adelete()

    @store_operation('количество ролей')
    async def count_roles(self) -> int:
        return await OfficialRole.objects.acount()

    # inventory
    @store_operation('список инвентаря')
    async def list_inventory(
        self,
        official_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[InventoryItem]:
        qs = InventoryItem.objects.select_related('official')
        if official_id is not None:
            qs = qs.filter(official_id=official_id)
        if search:
            qs = qs.filter(
                Q(description__icontains=search) |
                Q(code__icontains=search) |
                Q(official__full_name__icontains=search)
            )
        return [item async for item in qs]

    @store_operation('чтение инвентаря')
    async def get_inventory_item(self, item_id: int) -> InventoryItem:
        try:
            return await InventoryItem.objects.select_related('official').aget(pk=item_id)
        except InventoryItem.DoesNotExist:
            raise NotFoundError('Элемент инвентаря', item_id)

    @store_operation('добавление инвентаря')
    async def add_inventory_item(self, item: InventoryItem) -> InventoryItem:
        await item.asave()
        return item

    @store_operation('обновление инвентаря')
    async def update_inventory_item(self, item_id: int, **fields) -> None:
        updated = await InventoryItem.objects.filter(pk=item_id).aupdate(**fields)
        if not updated:
            raise NotFoundError('Элемент инвентаря', item_id)

    @store_operation('удаление инвентаря')
    async def delete_inventory_item(self, item_id: int) -> None:
        await InventoryItem.objects.filter(pk=item_id).adelete()

    @store_operation('удаление инвентаря служащего')
    async def delete_inventory_for(self, official_id: int) -> None:
        await InventoryItem.objects.filter(official_id=official_id).adelete()

    @store_operation('стоимость инвентаря')
    async def list_inventory_values(self) -> List[Optional[Decimal]]:
        return [value async for value in InventoryItem.objects.order_by().values_list('value', flat=True)]

    # official_events
    @store_operation('список мероприятий')
    async def list_events(self, official_id: Optional[int] = None) -> List[OfficialEvent]:
        qs = OfficialEvent.objects.order_by('scheduled_date', 'id')
        if official_id is not None:
            qs = qs.filter(official_id=official_id)
        return [event async for event in qs]

    @store_operation('создание мероприятий')
    async def add_events(self, events: Iterable[OfficialEvent]) -> List[OfficialEvent]:
        return await OfficialEvent.objects.abulk_create(list(events))

    @store_operation('удаление мероприятий служащего')
    async def delete_events_for(self, official_id: int) -> None:
        await OfficialEvent.objects.filter(official_id=official_id).adelete()

    @store_operation('предстоящие мероприятия')
    async def count_pending_events(self, after: date, before: date) -> int:
        return await OfficialEvent.objects.filter(
            completed=False,
            scheduled_date__gt=after,
            scheduled_date__lt=before,
        ).acount()

    # systems
    @store_operation('список систем')
    async def list_systems(self) -> List[SystemInfo]:
        return [system async for system in SystemInfo.objects.order_by('name')]

    @store_operation('чтение системы')
    async def get_system(self, system_id: int) -> SystemInfo:
        try:
            return await SystemInfo.objects.aget(pk=system_id)
        except SystemInfo.DoesNotExist:
            raise NotFoundError('Система', system_id)

    @store_operation('создание системы')
    async def add_system(self, system: SystemInfo) -> SystemInfo:
        await system.asave()
        return system

    @store_operation('обновление системы')
    async def update_system(self, system_id: int, **fields) -> None:
        updated = await SystemInfo.objects.filter(pk=system_id).aupdate(**fields)
        if not updated:
            raise NotFoundError('Система', system_id)

    @store_operation('удаление системы')
    async def delete_system(self, system_id: int) -> None:
        await SystemInfo.objects.filter(pk=system_id).adelete()
