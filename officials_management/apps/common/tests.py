import pytest
from django.core.exceptions import ValidationError
from django.http import HttpResponse
from django.test import RequestFactory
from rest_framework import status

from officials_management.apps.common.api.responses import service_error_response
from officials_management.apps.common.middleware import LogIPMiddleware
from officials_management.apps.officials.domain.exceptions import (
    EventSchedulingError,
    NotFoundError,
    StoreError,
)


class TestServiceErrorResponse:
    def test_validation_error(self):
        response = service_error_response(ValidationError({'full_name': 'Обязательное поле.'}))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'errors': {'full_name': ['Обязательное поле.']}}

    def test_plain_validation_error(self):
        response = service_error_response(ValidationError('Ошибка'))

        assert response.data == {'errors': {'non_field_errors': ['Ошибка']}}

    def test_not_found(self):
        response = service_error_response(NotFoundError('Служащий', 5))
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_store_error(self):
        assert service_error_response(StoreError('down')).status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert service_error_response(EventSchedulingError(5)).status_code == status.HTTP_503_SERVICE_UNAVAILABLE

    def test_other_errors_are_reraised(self):
        with pytest.raises(RuntimeError):
            service_error_response(RuntimeError('boom'))


class TestLogIPMiddleware:
    def test_logs_forwarded_ip(self, mocker):
        logger = mocker.patch('officials_management.apps.common.middleware.logger')
        middleware = LogIPMiddleware(lambda request: HttpResponse(status=204))
        request = RequestFactory().get('/api/officials/', HTTP_X_FORWARDED_FOR='10.0.0.1, 10.0.0.2')

        response = middleware(request)

        assert response.status_code == 204
        logger.info.assert_called_once_with('GET /api/officials/ from 10.0.0.1 -> 204')
