from asgiref.sync import async_to_sync
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.response import Response

from officials_management.apps.common.api.responses import service_error_response
from officials_management.apps.inventory.application.services import InventoryApplicationService
from officials_management.apps.officials.domain.exceptions import NotFoundError, StoreError, ValidationError

from .serializers import InventoryItemSerializer, InventoryItemUpdateSerializer

SERVICE_ERRORS = (ValidationError, NotFoundError, StoreError)


class InventoryItemViewSet(viewsets.ViewSet):
    """
    ViewSet для инвентаря служащих.
    Список возвращается вместе с данными служащего, новые записи первыми.
    """
    permission_classes = [permissions.IsAuthenticated]
    serializer_class = InventoryItemSerializer
    lookup_value_regex = r'\d+'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = InventoryApplicationService()

    @extend_schema(
        parameters=[
            OpenApiParameter('official', OpenApiTypes.INT, description='ID служащего'),
            OpenApiParameter('search', OpenApiTypes.STR, description='Описание, номер или ФИО'),
        ],
        responses=InventoryItemSerializer(many=True),
    )
    def list(self, request):
        official_id = request.query_params.get('official')
        try:
            items = async_to_sync(self.service.list_items)(
                int(official_id) if official_id else None,
                search=request.query_params.get('search'),
            )
        except ValueError:
            return Response({'errors': {'official': ['Ожидается целое число.']}}, status=status.HTTP_400_BAD_REQUEST)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(InventoryItemSerializer(items, many=True).data)

    @extend_schema(responses=InventoryItemSerializer)
    def retrieve(self, request, pk=None):
        try:
            item = async_to_sync(self.service.get_item)(int(pk))
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(InventoryItemSerializer(item).data)

    @extend_schema(request=InventoryItemSerializer, responses=InventoryItemSerializer)
    def create(self, request):
        serializer = InventoryItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            item = async_to_sync(self.service.add_item)(
                official_id=data['official_id'],
                description=data['description'],
                code=data['code'],
                value=data.get('value'),
            )
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(InventoryItemSerializer(item).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=InventoryItemUpdateSerializer, responses=InventoryItemSerializer)
    def partial_update(self, request, pk=None):
        serializer = InventoryItemUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        try:
            item = async_to_sync(self.service.update_item)(int(pk), **serializer.validated_data)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(InventoryItemSerializer(item).data)

    def destroy(self, request, pk=None):
        try:
            async_to_sync(self.service.delete_item)(int(pk))
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(status=status.HTTP_204_NO_CONTENT)
