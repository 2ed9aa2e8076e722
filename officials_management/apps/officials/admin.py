"""
Настройки админ-панели для служащих и их мероприятий
"""
from django.contrib import admin

from officials_management.apps.officials.models import Official, OfficialEvent


class OfficialEventInline(admin.TabularInline):
    """Inline для мероприятий служащего"""
    model = OfficialEvent
    extra = 0
    fields = ['event_type', 'scheduled_date', 'completed', 'completed_at', 'notes', 'origin']
    readonly_fields = ['origin']


@admin.register(Official)
class OfficialAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'document_id', 'position', 'procedure', 'status', 'entry_date']
    list_filter = ['status', 'procedure', 'entry_date']
    search_fields = ['full_name', 'document_id', 'position']
    date_hierarchy = 'entry_date'
    readonly_fields = ['created_at']
    inlines = [OfficialEventInline]


@admin.register(OfficialEvent)
class OfficialEventAdmin(admin.ModelAdmin):
    list_display = ['official', 'event_type', 'scheduled_date', 'completed', 'origin']
    list_filter = ['event_type', 'completed', 'scheduled_date']
    search_fields = ['official__full_name', 'official__document_id', 'notes']
    list_select_related = ['official']
    readonly_fields = ['origin', 'created_at']
