from django.contrib import admin

from officials_management.apps.systems.models import OfficialRole, SystemInfo


@admin.register(SystemInfo)
class SystemInfoAdmin(admin.ModelAdmin):
    list_display = ['name', 'description']
    search_fields = ['name']


@admin.register(OfficialRole)
class OfficialRoleAdmin(admin.ModelAdmin):
    list_display = ['official', 'system', 'granted_at']
    list_filter = ['system']
    search_fields = ['official__full_name', 'official__document_id', 'system__name']
    list_select_related = ['official', 'system']
