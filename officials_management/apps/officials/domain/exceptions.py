"""
Ошибки жизненного цикла служащего.

ValidationError - стандартная ошибка Django (поле -> сообщение), выбрасывается
до любой записи в хранилище. Остальные ошибки описывают отсутствие записи и
сбои самого хранилища, включая частично выполненные операции.
"""
from django.core.exceptions import ObjectDoesNotExist, ValidationError

__all__ = [
    'ValidationError',
    'NotFoundError',
    'StoreError',
    'EventSchedulingError',
    'OrphanedDependentsError',
]


class NotFoundError(ObjectDoesNotExist):
    """Запрошенная запись (служащий, роль, элемент инвентаря, система) не найдена"""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} с ID {entity_id} не найден(а).")


class StoreError(Exception):
    """Сбой чтения или записи в хранилище. Исходное исключение доступно в ``cause``."""

    def __init__(self, message: str, cause: BaseException = None):
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class EventSchedulingError(StoreError):
    """Запись служащего сохранена, но мероприятия записать не удалось"""

    def __init__(self, official_id, cause: BaseException = None):
        self.official_id = official_id
        super().__init__(
            f"Служащий {official_id} сохранен, но мероприятия не запланированы",
            cause
        )


class OrphanedDependentsError(StoreError):
    """Связанные записи удалены, но сама запись служащего осталась"""

    def __init__(self, official_id, cause: BaseException = None):
        self.official_id = official_id
        super().__init__(
            f"Роли, инвентарь и мероприятия служащего {official_id} удалены, "
            f"но удалить самого служащего не удалось",
            cause
        )
