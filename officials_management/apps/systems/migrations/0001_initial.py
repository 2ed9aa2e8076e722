import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('officials', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='SystemInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, unique=True, verbose_name='Название')),
                ('description', models.TextField(blank=True, verbose_name='Описание')),
            ],
            options={
                'verbose_name': 'Система',
                'verbose_name_plural': 'Системы',
                'db_table': 'systems',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='OfficialRole',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('granted_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Дата выдачи')),
                ('official', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='roles',
                    to='officials.official',
                    verbose_name='Служащий',
                )),
                ('system', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='roles',
                    to='systems.systeminfo',
                    verbose_name='Система',
                )),
            ],
            options={
                'verbose_name': 'Роль служащего',
                'verbose_name_plural': 'Роли служащих',
                'db_table': 'official_roles',
                'ordering': ['-granted_at', '-id'],
            },
        ),
    ]
