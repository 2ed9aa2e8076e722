"""
Преобразование ошибок сервисного слоя в ответы API
"""
from rest_framework import status
from rest_framework.response import Response

from officials_management.apps.officials.domain.exceptions import (
    NotFoundError,
    StoreError,
    ValidationError,
)


def validation_errors(exc: ValidationError) -> dict:
    if hasattr(exc, 'error_dict'):
        return exc.message_dict
    return {'non_field_errors': exc.messages}


def service_error_response(exc: Exception) -> Response:
    """
    ValidationError -> 400, NotFoundError -> 404, StoreError -> 503.
    Прочие исключения пробрасываются дальше.
    """
    if isinstance(exc, ValidationError):
        return Response({'errors': validation_errors(exc)}, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, NotFoundError):
        return Response({'error': str(exc)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, StoreError):
        return Response({'error': str(exc)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
    raise exc
