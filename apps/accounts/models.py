from django.conf import settings
from django.db import models


class AdminProfile(models.Model):
    """
    Registry of store administrators.
    Only users with ``is_admin`` set can sign in to the store admin.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='admin_profile',
        verbose_name='Usuario'
    )
    is_admin = models.BooleanField(
        default=True,
        verbose_name='Es administrador'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Creado el'
    )

    class Meta:
        verbose_name = 'Administrador'
        verbose_name_plural = 'Administradores'

    def __str__(self):
        return self.user.email or self.user.get_username()
