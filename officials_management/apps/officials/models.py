from django.db import models


class Official(models.Model):
    """Модель служащего (функционера)"""

    class EmploymentStatus(models.TextChoices):
        PROVISIONAL = 'PROVISIONAL', 'Временно назначен'
        POSITIONED = 'POSITIONED', 'Назначен на должность'
        INACTIVE = 'INACTIVE', 'Неактивен'
        FOLLOW_UP = 'FOLLOW_UP', 'На контроле'

    # Основная информация
    full_name = models.CharField(max_length=255, verbose_name='ФИО')
    age = models.PositiveSmallIntegerField(null=True, blank=True, verbose_name='Возраст')
    document_id = models.CharField(max_length=50, verbose_name='Номер документа')

    # Служебная информация
    position = models.CharField(max_length=255, verbose_name='Должность')
    profession = models.CharField(max_length=255, blank=True, verbose_name='Профессия')
    procedure = models.CharField(max_length=255, verbose_name='Процедура назначения')
    status = models.CharField(
        max_length=20,
        choices=EmploymentStatus.choices,
        default=EmploymentStatus.PROVISIONAL,
        verbose_name='Статус'
    )
    entry_date = models.DateField(verbose_name='Дата поступления')

    created_at = models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')

    class Meta:
        db_table = 'officials'
        verbose_name = 'Служащий'
        verbose_name_plural = 'Служащие'
        ordering = ['full_name']

    def __str__(self):
        return f"{self.full_name} ({self.document_id})"


class OfficialEvent(models.Model):
    """Плановое мероприятие служащего (контроль, оценка)"""

    class EventType(models.TextChoices):
        FOLLOW_UP = 'FOLLOW_UP', 'Контрольная встреча'
        TRIAL_PERIOD_EVALUATION = 'TRIAL_PERIOD_EVALUATION', 'Оценка испытательного срока'
        ANNUAL_EVALUATION = 'ANNUAL_EVALUATION', 'Ежегодная оценка'

    official = models.ForeignKey(
        'officials.Official',
        on_delete=models.CASCADE,
        related_name='events',
        verbose_name='Служащий'
    )
    event_type = models.CharField(
        max_length=30,
        choices=EventType.choices,
        verbose_name='Тип мероприятия'
    )
    scheduled_date = models.DateField(verbose_name='Плановая дата')
    completed = models.BooleanField(default=False, verbose_name='Выполнено')
    completed_at = models.DateTimeField(null=True, blank=True, verbose_name='Дата выполнения')
    notes = models.TextField(null=True, blank=True, verbose_name='Примечания')
    origin = models.CharField(
        max_length=50,
        blank=True,
        verbose_name='Источник',
        help_text='create или переход статуса, породивший мероприятие (например PROVISIONAL->POSITIONED)'
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')

    class Meta:
        db_table = 'official_events'
        verbose_name = 'Мероприятие служащего'
        verbose_name_plural = 'Мероприятия служащих'
        ordering = ['scheduled_date', 'id']
        indexes = [
            models.Index(fields=['completed', 'scheduled_date'], name='official_events_pending_idx'),
        ]

    def __str__(self):
        return f"{self.get_event_type_display()} - {self.scheduled_date}"
