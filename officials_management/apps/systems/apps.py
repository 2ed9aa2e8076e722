from django.apps import AppConfig


class SystemsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'officials_management.apps.systems'
    label = 'systems'
    verbose_name = '2. Системы и доступы'
