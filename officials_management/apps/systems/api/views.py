from asgiref.sync import async_to_sync
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.response import Response

from officials_management.apps.common.api.responses import service_error_response
from officials_management.apps.officials.domain.exceptions import NotFoundError, StoreError, ValidationError
from officials_management.apps.systems.application.services import SystemApplicationService

from .serializers import OfficialRoleSerializer, SystemInfoSerializer

SERVICE_ERRORS = (ValidationError, NotFoundError, StoreError)


class SystemViewSet(viewsets.ViewSet):
    """
    ViewSet для справочника информационных систем.
    """
    permission_classes = [permissions.IsAuthenticated]
    serializer_class = SystemInfoSerializer
    lookup_value_regex = r'\d+'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = SystemApplicationService()

    @extend_schema(responses=SystemInfoSerializer(many=True))
    def list(self, request):
        try:
            systems = async_to_sync(self.service.list_systems)()
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(SystemInfoSerializer(systems, many=True).data)

    @extend_schema(responses=SystemInfoSerializer)
    def retrieve(self, request, pk=None):
        try:
            system = async_to_sync(self.service.get_system)(int(pk))
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(SystemInfoSerializer(system).data)

    @extend_schema(request=SystemInfoSerializer, responses=SystemInfoSerializer)
    def create(self, request):
        serializer = SystemInfoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            system = async_to_sync(self.service.add_system)(**serializer.validated_data)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(SystemInfoSerializer(system).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=SystemInfoSerializer, responses=SystemInfoSerializer)
    def partial_update(self, request, pk=None):
        serializer = SystemInfoSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        try:
            system = async_to_sync(self.service.update_system)(int(pk), **serializer.validated_data)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(SystemInfoSerializer(system).data)

    def destroy(self, request, pk=None):
        try:
            async_to_sync(self.service.delete_system)(int(pk))
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(status=status.HTTP_204_NO_CONTENT)


class OfficialRoleViewSet(viewsets.ViewSet):
    """
    ViewSet для доступов служащих к системам.
    """
    permission_classes = [permissions.IsAuthenticated]
    serializer_class = OfficialRoleSerializer
    lookup_value_regex = r'\d+'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = SystemApplicationService()

    @extend_schema(
        parameters=[OpenApiParameter('official', OpenApiTypes.INT, description='ID служащего')],
        responses=OfficialRoleSerializer(many=True),
    )
    def list(self, request):
        official_id = request.query_params.get('official')
        try:
            roles = async_to_sync(self.service.list_roles)(int(official_id) if official_id else None)
        except ValueError:
            return Response({'errors': {'official': ['Ожидается целое число.']}}, status=status.HTTP_400_BAD_REQUEST)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(OfficialRoleSerializer(roles, many=True).data)

    @extend_schema(request=OfficialRoleSerializer, responses=OfficialRoleSerializer)
    def create(self, request):
        serializer = OfficialRoleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            role = async_to_sync(self.service.grant_role)(
                serializer.validated_data['official_id'],
                serializer.validated_data['system_id'],
            )
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(OfficialRoleSerializer(role).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):
        try:
            async_to_sync(self.service.revoke_role)(int(pk))
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(status=status.HTTP_204_NO_CONTENT)
