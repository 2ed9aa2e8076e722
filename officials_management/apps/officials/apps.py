"""
Конфигурация приложения officials
"""
from django.apps import AppConfig


class OfficialsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'officials_management.apps.officials'
    label = 'officials'
    verbose_name = '1. Служащие и мероприятия'
