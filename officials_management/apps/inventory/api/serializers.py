from rest_framework import serializers

from officials_management.apps.inventory.models import InventoryItem
from officials_management.apps.officials.models import Official


class OfficialBasicSerializer(serializers.ModelSerializer):
    """Базовый сериализатор служащего для вложенного представления"""

    class Meta:
        model = Official
        fields = ['id', 'full_name', 'document_id', 'position']


class InventoryItemSerializer(serializers.ModelSerializer):
    official_id = serializers.IntegerField()
    official = OfficialBasicSerializer(read_only=True)

    class Meta:
        model = InventoryItem
        fields = ['id', 'official_id', 'official', 'description', 'code', 'value', 'assigned_at']
        read_only_fields = ['id', 'assigned_at']


class InventoryItemUpdateSerializer(serializers.ModelSerializer):
    """Закрепление за другим служащим через обновление не допускается"""

    class Meta:
        model = InventoryItem
        fields = ['description', 'code', 'value']
