from django.apps import AppConfig


class InventoryConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'officials_management.apps.inventory'
    label = 'inventory'
    verbose_name = '3. Инвентарь'
