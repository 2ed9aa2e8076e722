from django.contrib import admin

from officials_management.apps.inventory.models import InventoryItem


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ['code', 'description', 'official', 'value', 'assigned_at']
    search_fields = ['code', 'description', 'official__full_name']
    list_select_related = ['official']
