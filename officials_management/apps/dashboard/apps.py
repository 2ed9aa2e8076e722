"""
Dashboard app configuration
"""
from django.apps import AppConfig


class DashboardConfig(AppConfig):
    name = 'officials_management.apps.dashboard'
    label = 'dashboard'
    verbose_name = '4. Сводные показатели'
