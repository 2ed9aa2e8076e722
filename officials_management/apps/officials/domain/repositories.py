from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from officials_management.apps.inventory.models import InventoryItem
from officials_management.apps.officials.models import Official, OfficialEvent
from officials_management.apps.systems.models import OfficialRole, SystemInfo


class RecordStore(ABC):
    """
    Асинхронное хранилище записей служащих.
    Пять независимых коллекций: officials, official_roles, inventory,
    official_events, systems. Транзакции и блокировки не предполагаются:
    каждая операция записи выполняется отдельно и либо проходит, либо
    выбрасывает StoreError. Отсутствие записи при чтении по ID - NotFoundError.
    """

    # officials
    @abstractmethod
    async def list_officials(
        self,
        official_id: Optional[int] = None,
        search: Optional[str] = None,
        status: Optional[str] = None,
        procedure: Optional[str] = None,
    ) -> List[Official]:
        pass

    @abstractmethod
    async def get_official(self, official_id: int) -> Official:
        pass

    @abstractmethod
    async def add_official(self, official: Official) -> Official:
        pass

    @abstractmethod
    async def update_official(self, official_id: int, **fields) -> None:
        pass

    @abstractmethod
    async def delete_official(self, official_id: int) -> None:
        pass

    @abstractmethod
    async def list_official_statuses(self) -> List[str]:
        pass

    @abstractmethod
    async def list_procedures(self) -> List[str]:
        pass

    # official_roles
    @abstractmethod
    async def list_roles(self, official_id: Optional[int] = None) -> List[OfficialRole]:
        pass

    @abstractmethod
    async def get_role(self, role_id: int) -> OfficialRole:
        pass

    @abstractmethod
    async def add_role(self, role: OfficialRole) -> OfficialRole:
        pass

    @abstractmethod
    async def delete_role(self, role_id: int) -> None:
        pass

    @abstractmethod
    async def delete_roles_for(self, official_id: int) -> None:
        pass

    @abstractmethod
    async def count_roles(self) -> int:
        pass

    # inventory
    @abstractmethod
    async def list_inventory(
        self,
        official_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[InventoryItem]:
        pass

    @abstractmethod
    async def get_inventory_item(self, item_id: int) -> InventoryItem:
        pass

    @abstractmethod
    async def add_inventory_item(self, item: InventoryItem) -> InventoryItem:
        pass

    @abstractmethod
    async def update_inventory_item(self, item_id: int, **fields) -> None:
        pass

    @abstractmethod
    async def delete_inventory_item(self, item_id: int) -> None:
        pass

    @abstractmethod
    async def delete_inventory_for(self, official_id: int) -> None:
        pass

    @abstractmethod
    async def list_inventory_values(self) -> List[Optional[Decimal]]:
        pass

    # official_events
    @abstractmethod
    async def list_events(self, official_id: Optional[int] = None) -> List[OfficialEvent]:
        pass

    @abstractmethod
    async def add_events(self, events: Iterable[OfficialEvent]) -> List[OfficialEvent]:
        pass

    @abstractmethod
    async def delete_events_for(self, official_id: int) -> None:
        pass

    @abstractmethod
    async def count_pending_events(self, after: date, before: date) -> int:
        """Невыполненные мероприятия с after < scheduled_date < before"""
        pass

    # systems
    @abstractmethod
    async def list_systems(self) -> List[SystemInfo]:
        pass

    @abstractmethod
    async def get_system(self, system_id: int) -> SystemInfo:
        pass

    @abstractmethod
    async def add_system(self, system: SystemInfo) -> SystemInfo:
        pass

    @abstractmethod
    async def update_system(self, system_id: int, **fields) -> None:
        pass

    @abstractmethod
    async def delete_system(self, system_id: int) -> None:
        pass
