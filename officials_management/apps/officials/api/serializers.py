from rest_framework import serializers

from officials_management.apps.inventory.api.serializers import InventoryItemSerializer
from officials_management.apps.officials.models import Official, OfficialEvent
from officials_management.apps.systems.api.serializers import OfficialRoleSerializer


class OfficialSerializer(serializers.ModelSerializer):
    """
    Сериализатор для модели Official.
    """
    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Official
        fields = [
            'id', 'full_name', 'age', 'document_id', 'position', 'profession',
            'procedure', 'status', 'status_display', 'entry_date', 'created_at'
        ]
        read_only_fields = ['id', 'created_at']


class OfficialStatusSerializer(serializers.Serializer):
    """Сериализатор для смены статуса"""
    status = serializers.ChoiceField(choices=Official.EmploymentStatus.choices)


class OfficialEventSerializer(serializers.ModelSerializer):
    """Сериализатор мероприятий служащего"""
    event_type_display = serializers.CharField(source='get_event_type_display', read_only=True)

    class Meta:
        model = OfficialEvent
        fields = [
            'id', 'official', 'event_type', 'event_type_display', 'scheduled_date',
            'completed', 'completed_at', 'notes', 'origin', 'created_at'
        ]
        read_only_fields = fields


class OfficialRecordsSerializer(serializers.Serializer):
    """Все данные служащего: учетная запись, роли, инвентарь, мероприятия"""
    officials = OfficialSerializer(many=True)
    roles = OfficialRoleSerializer(many=True)
    inventory = InventoryItemSerializer(many=True)
    events = OfficialEventSerializer(many=True)

