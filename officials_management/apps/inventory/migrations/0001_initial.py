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
            name='InventoryItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('description', models.CharField(max_length=255, verbose_name='Описание')),
                ('code', models.CharField(max_length=100, verbose_name='Инвентарный номер')),
                ('value', models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True, verbose_name='Стоимость')),
                ('assigned_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Дата закрепления')),
                ('official', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='inventory',
                    to='officials.official',
                    verbose_name='Служащий',
                )),
            ],
            options={
                'verbose_name': 'Элемент инвентаря',
                'verbose_name_plural': 'Инвентарь',
                'db_table': 'inventory',
                'ordering': ['-assigned_at', '-id'],
            },
        ),
    ]
