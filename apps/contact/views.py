from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import submit_contact_message


class ContactMessageView(APIView):
    """Public contact form endpoint."""
    permission_classes = [AllowAny]

    def post(self, request):
        message_id = submit_contact_message(request.data)
        return Response(
            {'id': message_id, 'message': '¡Mensaje enviado! Te responderemos pronto.'},
            status=status.HTTP_201_CREATED
        )
