from rest_framework.permissions import SAFE_METHODS, BasePermission

from .services import check_admin_status


class IsStoreAdmin(BasePermission):
    message = 'No tienes permisos de administrador'

    def has_permission(self, request, view):
        return check_admin_status(request.user)


class IsStoreAdminOrReadOnly(IsStoreAdmin):

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return super().has_permission(request, view)
