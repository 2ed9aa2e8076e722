from django.db import models
from django.utils import timezone


class SystemInfo(models.Model):
    """Информационная система, к которой выдаются доступы"""

    name = models.CharField(max_length=255, unique=True, verbose_name='Название')
    description = models.TextField(blank=True, verbose_name='Описание')

    class Meta:
        db_table = 'systems'
        verbose_name = 'Система'
        verbose_name_plural = 'Системы'
        ordering = ['name']

    def __str__(self):
        return self.name


class OfficialRole(models.Model):
    """Доступ (роль) служащего в информационной системе"""

    official = models.ForeignKey(
        'officials.Official',
        on_delete=models.CASCADE,
        related_name='roles',
        verbose_name='Служащий'
    )
    system = models.ForeignKey(
        'systems.SystemInfo',
        on_delete=models.PROTECT,
        related_name='roles',
        verbose_name='Система'
    )
    granted_at = models.DateTimeField(default=timezone.now, verbose_name='Дата выдачи')

    class Meta:
        db_table = 'official_roles'
        verbose_name = 'Роль служащего'
        verbose_name_plural = 'Роли служащих'
        ordering = ['-granted_at', '-id']

    def __str__(self):
        return f"{self.official_id} → {self.system_id}"
