import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from django.utils import timezone

from officials_management.apps.inventory.models import InventoryItem
from officials_management.apps.officials.domain.exceptions import StoreError, ValidationError
from officials_management.apps.officials.domain.repositories import RecordStore
from officials_management.apps.officials.infrastructure.repositories import DjangoRecordStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('description', 'code', 'value')


def _to_decimal(value) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError({'value': f"Некорректная стоимость: {value}"})


class InventoryApplicationService:
    """
    Сервис для учета инвентаря, закрепленного за служащими.
    """
    def __init__(self, record_store: RecordStore = DjangoRecordStore()):
        self.record_store = record_store

    async def list_items(
        self,
        official_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[InventoryItem]:
        return await self.record_store.list_inventory(official_id, search=search)

    async def get_item(self, item_id: int) -> InventoryItem:
        return await self.record_store.get_inventory_item(item_id)

    async def add_item(self, official_id: int, description: str, code: str, value) -> InventoryItem:
        """
        Закрепление элемента инвентаря за служащим

        Raises:
            ValidationError: Не заполнены обязательные поля
            NotFoundError: Служащий не найден
            StoreError: Ошибка записи
        """
        data = {'description': description, 'code': code, 'value': value}
        missing = {
            field: 'Обязательное поле.'
            for field in REQUIRED_FIELDS
            if data[field] is None or (isinstance(data[field], str) and not data[field].strip())
        }
        if not official_id:
            missing['official'] = 'Обязательное поле.'
        if missing:
            raise ValidationError(missing)
        amount = _to_decimal(value)

        official = await self.record_store.get_official(official_id)
        item = InventoryItem(
            official=official,
            description=description,
            code=code,
            value=amount,
            assigned_at=timezone.now(),
        )
        try:
            item = await self.record_store.add_inventory_item(item)
        except StoreError:
            logger.error(f"Ошибка при добавлении инвентаря служащему {official_id}", exc_info=True)
            raise
        logger.info(f"Служащему {official_id} закреплен инвентарь {item.code}")
        return item

    async def update_item(self, item_id: int, **changes) -> InventoryItem:
        fields = {key: value for key, value in changes.items() if key in REQUIRED_FIELDS}
        blanked = {
            field: 'Обязательное поле.'
            for field, value in fields.items()
            if field != 'value' and (value is None or not str(value).strip())
        }
        if blanked:
            raise ValidationError(blanked)
        if fields.get('value') is not None:
            fields['value'] = _to_decimal(fields['value'])

        if fields:
            try:
                await self.record_store.update_inventory_item(item_id, **fields)
            except StoreError:
                logger.error(f"Ошибка при обновлении инвентаря {item_id}", exc_info=True)
                raise
        return await self.record_store.get_inventory_item(item_id)

    async def delete_item(self, item_id: int) -> None:
        try:
            await self.record_store.delete_inventory_item(item_id)
        except StoreError:
            logger.error(f"Ошибка при удалении инвентаря {item_id}", exc_info=True)
            raise
        logger.info(f"Инвентарь {item_id} удален")
