"""
API Views для управления служащими
"""
from asgiref.sync import async_to_sync
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import filters, permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from officials_management.apps.common.api.responses import service_error_response
from officials_management.apps.officials.application.services import OfficialLifecycleService
from officials_management.apps.officials.domain.exceptions import (
    EventSchedulingError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from officials_management.apps.officials.models import Official, OfficialEvent

from .serializers import (
    OfficialEventSerializer,
    OfficialRecordsSerializer,
    OfficialSerializer,
    OfficialStatusSerializer,
)

SERVICE_ERRORS = (ValidationError, NotFoundError, StoreError)


class OfficialViewSet(viewsets.ViewSet):
    """
    ViewSet для управления служащими

    Endpoints:
    - GET /officials/ - Список служащих (search, status, procedure)
    - GET /officials/{id}/ - Служащий
    - POST /officials/ - Создание служащего и его мероприятий
    - PATCH /officials/{id}/ - Изменение учетных данных
    - DELETE /officials/{id}/ - Удаление служащего со всеми данными
    - POST /officials/{id}/change_status/ - Смена статуса
    - GET /officials/{id}/records/ - Роли, инвентарь и мероприятия служащего
    - GET /officials/procedures/ - Процедуры назначения для фильтра
    """
    permission_classes = [permissions.IsAuthenticated]
    serializer_class = OfficialSerializer
    lookup_value_regex = r'\d+'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = OfficialLifecycleService()

    @extend_schema(
        parameters=[
            OpenApiParameter('search', OpenApiTypes.STR, description='ФИО, номер документа или должность'),
            OpenApiParameter('status', OpenApiTypes.STR, enum=Official.EmploymentStatus.values),
            OpenApiParameter('procedure', OpenApiTypes.STR),
        ],
        responses=OfficialSerializer(many=True),
    )
    def list(self, request):
        try:
            officials = async_to_sync(self.service.list_officials)(
                search=request.query_params.get('search'),
                status=request.query_params.get('status'),
                procedure=request.query_params.get('procedure'),
            )
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(OfficialSerializer(officials, many=True).data)

    @extend_schema(responses=OfficialSerializer)
    def retrieve(self, request, pk=None):
        try:
            official = async_to_sync(self.service.get_official)(int(pk))
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(OfficialSerializer(official).data)

    @extend_schema(request=OfficialSerializer, responses=OfficialSerializer)
    def create(self, request):
        """Создание служащего; мероприятия планируются автоматически"""
        serializer = OfficialSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        warning = None
        try:
            official_id = async_to_sync(self.service.create_official)(**serializer.validated_data)
        except EventSchedulingError as e:
            # служащий сохранен, мероприятия - нет
            official_id = e.official_id
            warning = str(e)
        except SERVICE_ERRORS as e:
            return service_error_response(e)

        try:
            official = async_to_sync(self.service.get_official)(official_id)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        data = dict(OfficialSerializer(official).data)
        if warning:
            data['warning'] = warning
        return Response(data, status=status.HTTP_201_CREATED)

    @extend_schema(request=OfficialSerializer, responses=OfficialSerializer)
    def partial_update(self, request, pk=None):
        serializer = OfficialSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        try:
            official = async_to_sync(self.service.update_official)(int(pk), **serializer.validated_data)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(OfficialSerializer(official).data)

    def destroy(self, request, pk=None):
        try:
            async_to_sync(self.service.delete_official)(int(pk))
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=OfficialStatusSerializer, responses=OfficialSerializer)
    @action(detail=True, methods=['post'])
    def change_status(self, request, pk=None):
        """Смена статуса; PROVISIONAL -> POSITIONED планирует мероприятия"""
        serializer = OfficialStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            official = async_to_sync(self.service.change_status)(int(pk), serializer.validated_data['status'])
        except EventSchedulingError as e:
            return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(OfficialSerializer(official).data)

    @extend_schema(responses=OfficialRecordsSerializer)
    @action(detail=True, methods=['get'])
    def records(self, request, pk=None):
        try:
            records = async_to_sync(self.service.list_for)(int(pk))
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        if not records.officials:
            return Response({'error': f"Служащий с ID {pk} не найден."}, status=status.HTTP_404_NOT_FOUND)
        return Response(OfficialRecordsSerializer(records).data)

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    @action(detail=False, methods=['get'])
    def procedures(self, request):
        try:
            procedures = async_to_sync(self.service.list_procedures)()
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(procedures)


class OfficialEventViewSet(viewsets.ReadOnlyModelViewSet):
    """Мероприятия служащих (только чтение)"""

    queryset = OfficialEvent.objects.all()
    serializer_class = OfficialEventSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_fields = ['official', 'event_type', 'completed']
    ordering_fields = ['scheduled_date', 'created_at']
    ordering = ['scheduled_date']
