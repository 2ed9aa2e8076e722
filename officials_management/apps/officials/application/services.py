"""
Сервисный слой жизненного цикла служащего: создание, смена статуса, удаление
"""
import logging
from datetime import date
from typing import List, Optional

from officials_management.apps.officials.domain.exceptions import (
    EventSchedulingError,
    OrphanedDependentsError,
    StoreError,
    ValidationError,
)
from officials_management.apps.officials.domain.repositories import RecordStore
from officials_management.apps.officials.domain.scheduler import schedule_events
from officials_management.apps.officials.domain.transitions import (
    TransitionEffect,
    transition_effect,
    transition_label,
)
from officials_management.apps.officials.domain.value_objects import OfficialRecords
from officials_management.apps.officials.infrastructure.repositories import DjangoRecordStore
from officials_management.apps.officials.models import Official, OfficialEvent

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('full_name', 'document_id', 'position', 'procedure', 'entry_date', 'status')
EDITABLE_FIELDS = ('full_name', 'age', 'document_id', 'position', 'profession', 'procedure', 'entry_date')

CREATE_ORIGIN = 'create'


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _validate_status(status: str):
    if status not in Official.EmploymentStatus.values:
        raise ValidationError({'status': f"Неизвестный статус '{status}'."})


def _coerce_date(value) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationError({'entry_date': f"Неверный формат даты: {value}. Используйте YYYY-MM-DD"})


class OfficialLifecycleService:
    """Сервис для управления жизненным циклом служащих"""

    def __init__(self, record_store: RecordStore = DjangoRecordStore()):
        self.record_store = record_store

    async def create_official(self, **data) -> int:
        """
        Создание служащего и его обязательных мероприятий

        Сначала сохраняется служащий, затем мероприятия, рассчитанные по дате
        поступления и статусу. Если мероприятия записать не удалось,
        служащий остается сохраненным.

        Args:
            **data: Поля служащего (full_name, age, document_id, position,
                profession, procedure, status, entry_date)

        Returns:
            int: ID созданного служащего

        Raises:
            ValidationError: Не заполнены обязательные поля (до записи)
            StoreError: Не удалось сохранить служащего
            EventSchedulingError: Служащий сохранен, мероприятия - нет
        """
        missing = {
            field: 'Обязательное поле.'
            for field in REQUIRED_FIELDS
            if _is_blank(data.get(field))
        }
        if missing:
            raise ValidationError(missing)
        _validate_status(data['status'])
        data['entry_date'] = _coerce_date(data['entry_date'])

        official = Official(**{
            field: value for field, value in data.items()
            if field in REQUIRED_FIELDS or field in EDITABLE_FIELDS
        })

        try:
            official = await self.record_store.add_official(official)
        except StoreError:
            logger.error("Ошибка при создании служащего", exc_info=True)
            raise

        await self._persist_events(official, official.status, CREATE_ORIGIN)

        logger.info(f"Создан служащий {official.id} ({official.status})")
        return official.id

    async def change_status(self, official_id: int, new_status: str) -> Official:
        """
        Смена статуса служащего

        Допустим любой переход. Побочное действие перехода берется из таблицы
        переходов: для PROVISIONAL -> POSITIONED планируются мероприятия
        назначенного служащего от исходной даты поступления.

        Raises:
            NotFoundError: Служащий не найден
            ValidationError: Неизвестный статус
            StoreError: Ошибка чтения или записи статуса
            EventSchedulingError: Статус изменен, мероприятия не запланированы
        """
        _validate_status(new_status)
        try:
            official = await self.record_store.get_official(official_id)
        except StoreError:
            logger.error(f"Ошибка при чтении служащего {official_id}", exc_info=True)
            raise
        old_status = official.status

        try:
            await self.record_store.update_official(official_id, status=new_status)
        except StoreError:
            logger.error(f"Ошибка при смене статуса служащего {official_id}", exc_info=True)
            raise
        official.status = new_status

        effect = transition_effect(old_status, new_status)
        if effect is TransitionEffect.SCHEDULE_POSITIONED_EVENTS:
            await self._persist_events(
                official,
                Official.EmploymentStatus.POSITIONED,
                transition_label(old_status, new_status),
            )

        logger.info(f"Статус служащего {official_id}: {old_status} -> {new_status}")
        return official

    async def update_official(self, official_id: int, **changes) -> Official:
        """
        Изменение учетных данных служащего.
        Статус, если передан, меняется через change_status.
        """
        new_status = changes.pop('status', None)
        blanked = {
            field: 'Обязательное поле.'
            for field in REQUIRED_FIELDS
            if field in changes and _is_blank(changes[field])
        }
        if blanked:
            raise ValidationError(blanked)
        if new_status is not None:
            _validate_status(new_status)

        fields ={field: value for field, value in changes.items() if field in EDITABLE_FIELDS}
        if 'entry_date' in fields:
            fields['entry_date'] = _coerce_date(fields['entry_date'])
        if fields:
            try:
                await self.record_store.update_official(official_id, **fields)
            except StoreError:
                logger.error(f"Ошибка при обновлении служащего {official_id}", exc_info=True)
                raise

        if new_status is not None:
            return await self.change_status(official_id, new_status)
        return await self.record_store.get_official(official_id)

    async def delete_official(self, official_id: int) -> None:
        """
        Удаление служащего вместе с ролями, инвентарем и мероприятиями

        Зависимые записи удаляются по очереди (роли, инвентарь, мероприятия),
        затем сам служащий. Компенсации нет: если не удалось удалить
        служащего, зависимые записи уже удалены.

        Raises:
            StoreError: Не удалось удалить зависимые записи
            OrphanedDependentsError: Зависимые записи удалены, служащий - нет
        """
        try:
            await self.record_store.delete_roles_for(official_id)
            await self.record_store.delete_inventory_for(official_id)
            await self.record_store.delete_events_for(official_id)
        except StoreError:
            logger.error(f"Ошибка при удалении данных служащего {official_id}", exc_info=True)
            raise

        try:
            await self.record_store.delete_official(official_id)
        except StoreError as exc:
            logger.error(f"Служащий {official_id} не удален после удаления зависимых записей", exc_info=True)
            raise OrphanedDependentsError(official_id, exc.cause or exc) from exc

        logger.info(f"Служащий {official_id} удален")

    async def get_official(self, official_id: int) -> Official:
        return await self.record_store.get_official(official_id)

    async def list_for(self, official_id: Optional[int] = None) -> OfficialRecords:
        """Срез служащих, ролей (с системами), инвентаря и мероприятий"""
        try:
            return OfficialRecords(
                officials=await self.record_store.list_officials(official_id=official_id),
                roles=await self.record_store.list_roles(official_id),
                inventory=await self.record_store.list_inventory(official_id),
                events=await self.record_store.list_events(official_id),
            )
        except StoreError:
            logger.error(f"Ошибка при чтении данных служащего {official_id}", exc_info=True)
            raise

    async def list_officials(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        procedure: Optional[str] = None,
    ) -> List[Official]:
        return await self.record_store.list_officials(search=search, status=status, procedure=procedure)

    async def list_procedures(self) -> List[str]:
        return await self.record_store.list_procedures()

    async def _persist_events(self, official: Official, status: str, origin: str) -> List[OfficialEvent]:
        scheduled = schedule_events(official.entry_date, status)
        if not scheduled:
            return []

        events = [
            OfficialEvent(
                official_id=official.id,
                event_type=item.event_type,
                scheduled_date=item.scheduled_date,
                completed=False,
                notes=None,
                origin=origin,
            )
            for item in scheduled
        ]
        try:
            return await self.record_store.add_events(events)
        except StoreError as exc:
            logger.error(f"Ошибка при планировании мероприятий служащего {official.id}", exc_info=True)
            raise EventSchedulingError(official.id, exc.cause or exc) from exc
