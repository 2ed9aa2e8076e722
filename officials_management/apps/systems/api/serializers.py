from rest_framework import serializers

from officials_management.apps.systems.models import OfficialRole, SystemInfo


class SystemInfoSerializer(serializers.ModelSerializer):
    class Meta:
        model = SystemInfo
        fields = ['id', 'name', 'description']
        read_only_fields = ['id']


class OfficialRoleSerializer(serializers.ModelSerializer):
    """
    Сериализатор роли с вложенной системой (id, name, description).
    """
    system = SystemInfoSerializer(read_only=True)
    system_id = serializers.IntegerField(write_only=True)
    official_id = serializers.IntegerField()

    class Meta:
        model = OfficialRole
        fields = ['id', 'official_id', 'system_id', 'system', 'granted_at']
        read_only_fields = ['id', 'granted_at']
