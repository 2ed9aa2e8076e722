import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Official',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('full_name', models.CharField(max_length=255, verbose_name='ФИО')),
                ('age', models.PositiveSmallIntegerField(blank=True, null=True, verbose_name='Возраст')),
                ('document_id', models.CharField(max_length=50, verbose_name='Номер документа')),
                ('position', models.CharField(max_length=255, verbose_name='Должность')),
                ('profession', models.CharField(blank=True, max_length=255, verbose_name='Профессия')),
                ('procedure', models.CharField(max_length=255, verbose_name='Процедура назначения')),
                ('status', models.CharField(
                    choices=[
                        ('PROVISIONAL', 'Временно назначен'),
                        ('POSITIONED', 'Назначен на должность'),
                        ('INACTIVE', 'Неактивен'),
                        ('FOLLOW_UP', 'На контроле'),
                    ],
                    default='PROVISIONAL',
                    max_length=20,
                    verbose_name='Статус',
                )),
                ('entry_date', models.DateField(verbose_name='Дата поступления')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
            ],
            options={
                'verbose_name': 'Служащий',
                'verbose_name_plural': 'Служащие',
                'db_table': 'officials',
                'ordering': ['full_name'],
            },
        ),
        migrations.CreateModel(
            name='OfficialEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('event_type', models.CharField(
                    choices=[
                        ('FOLLOW_UP', 'Контрольная встреча'),
                        ('TRIAL_PERIOD_EVALUATION', 'Оценка испытательного срока'),
                        ('ANNUAL_EVALUATION', 'Ежегодная оценка'),
                    ],
                    max_length=30,
                    verbose_name='Тип мероприятия',
                )),
                ('scheduled_date', models.DateField(verbose_name='Плановая дата')),
                ('completed', models.BooleanField(default=False, verbose_name='Выполнено')),
                ('completed_at', models.DateTimeField(blank=True, null=True, verbose_name='Дата выполнения')),
                ('notes', models.TextField(blank=True, null=True, verbose_name='Примечания')),
                ('origin', models.CharField(
                    blank=True,
                    help_text='create или переход статуса, породивший мероприятие (например PROVISIONAL->POSITIONED)',
                    max_length=50,
                    verbose_name='Источник',
                )),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('official', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='events',
                    to='officials.official',
                    verbose_name='Служащий',
                )),
            ],
            options={
                'verbose_name': 'Мероприятие служащего',
                'verbose_name_plural': 'Мероприятия служащих',
                'db_table': 'official_events',
                'ordering': ['scheduled_date', 'id'],
                'indexes': [
                    models.Index(fields=['completed', 'scheduled_date'], name='official_events_pending_idx'),
                ],
            },
        ),
    ]
