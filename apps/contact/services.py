import logging

from django.db import DatabaseError

from apps.catalog.exceptions import BackendUnavailable
from .serializers import ContactMessageSerializer

logger = logging.getLogger(__name__)


def submit_contact_message(data):
    """
    Validate and store a contact form submission. Returns the new message id.
    Raises rest_framework ValidationError with per-field messages.
    """
    serializer = ContactMessageSerializer(data=data)
    serializer.is_valid(raise_exception=True)
    try:
        message = serializer.save()
    except DatabaseError as e:
        logger.exception('Error saving contact message')
        raise BackendUnavailable('Error al enviar mensaje. Por favor intenta de nuevo.') from e

    logger.info('Contact message %s received from %s', message.pk, message.email)
    return message.pk
