from django.db import models
from django.utils import timezone


class InventoryItem(models.Model):
    """Материальная ценность, закрепленная за служащим"""

    official = models.ForeignKey(
        'officials.Official',
        on_delete=models.CASCADE,
        related_name='inventory',
        verbose_name='Служащий'
    )
    description = models.CharField(max_length=255, verbose_name='Описание')
    code = models.CharField(max_length=100, verbose_name='Инвентарный номер')
    value = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name='Стоимость'
    )
    assigned_at = models.DateTimeField(default=timezone.now, verbose_name='Дата закрепления')

    class Meta:
        db_table = 'inventory'
        verbose_name = 'Элемент инвентаря'
        verbose_name_plural = 'Инвентарь'
        ordering = ['-assigned_at', '-id']

    def __str__(self):
        return f"{self.code} - {self.description}"
