"""
Maps storefront errors to API responses with a Spanish ``detail`` message.
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.catalog.exceptions import (
    BackendNotConfigured,
    BackendUnavailable,
    ImageValidationError,
    InvalidCredentials,
    NotAnAdmin,
    ProductNotFound,
    StorefrontError,
    UploadError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    BackendNotConfigured: status.HTTP_503_SERVICE_UNAVAILABLE,
    BackendUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
    ProductNotFound: status.HTTP_404_NOT_FOUND,
    ImageValidationError: status.HTTP_400_BAD_REQUEST,
    UploadError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentials: status.HTTP_400_BAD_REQUEST,
    NotAnAdmin: status.HTTP_403_FORBIDDEN,
}


def storefront_exception_handler(exc, context):
    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(detail={'detail': exc.messages})

    if isinstance(exc, StorefrontError):
        code = STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
        if code >= 500:
            logger.error('%s: %s', type(exc).__name__, exc.message)
        return Response({'detail': exc.message, 'code': exc.code}, status=code)

    return exception_handler(exc, context)
