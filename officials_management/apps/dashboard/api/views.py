from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from officials_management.apps.dashboard.application.services import DashboardMetricsAggregator

from .serializers import DashboardMetricsSerializer


class DashboardMetricsView(APIView):
    """
    Сводные показатели: служащие по статусам, доступы, стоимость инвентаря,
    ближайшие мероприятия. При ошибке чтения показатели нулевые, а текст
    ошибки передается в поле error.
    """
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(responses=DashboardMetricsSerializer)
    def get(self, request):
        metrics = async_to_sync(DashboardMetricsAggregator().aggregate)()
        return Response(DashboardMetricsSerializer(metrics).data)
