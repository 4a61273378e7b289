from dataclasses import asdict

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .permissions import IsStoreAdmin
from .serializers import AdminUserSerializer, LoginSerializer
from .services import current_admin, sign_in_admin, sign_out_admin


class LoginView(APIView):
    """Email/password sign-in for store admins."""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        admin = sign_in_admin(
            request,
            serializer.validated_data['email'],
            serializer.validated_data['password'],
        )
        return Response(AdminUserSerializer(asdict(admin)).data)


class LogoutView(APIView):
    permission_classes = [IsStoreAdmin]

    def post(self, request):
        sign_out_admin(request)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CurrentAdminView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        admin = current_admin(request)
        if admin is None:
            return Response({'admin': None})
        return Response({'admin': AdminUserSerializer(asdict(admin)).data})
