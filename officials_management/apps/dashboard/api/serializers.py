from rest_framework import serializers


class StatusCountsSerializer(serializers.Serializer):
    PROVISIONAL = serializers.IntegerField()
    POSITIONED = serializers.IntegerField()
    INACTIVE = serializers.IntegerField()
    FOLLOW_UP = serializers.IntegerField()


class DashboardMetricsSerializer(serializers.Serializer):
    """Сводные показатели главной страницы"""
    officials_count = serializers.IntegerField()
    active_roles_count = serializers.IntegerField()
    total_inventory_value = serializers.DecimalField(max_digits=18, decimal_places=2)
    status_counts = StatusCountsSerializer()
    upcoming_events = serializers.IntegerField()
    error = serializers.CharField(allow_null=True)
