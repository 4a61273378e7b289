"""
Admin authentication.

Signing in fails closed: a user whose credentials are valid but who is not
in the admin registry is signed back out right away.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import transaction

from apps.catalog.exceptions import InvalidCredentials, NotAnAdmin
from .models import AdminProfile

logger = logging.getLogger(__name__)


@dataclass
class AdminUser:
    uid: int
    email: str
    is_admin: bool = True
    display_name: Optional[str] = None

    @classmethod
    def from_user(cls, user):
        return cls(
            uid=user.pk,
            email=user.email,
            is_admin=True,
            display_name=user.get_full_name() or None,
        )


def check_admin_status(user) -> bool:
    if user is None or not user.is_authenticated:
        return False
    return AdminProfile.objects.filter(user=user, is_admin=True).exists()


def sign_in_admin(request, email, password) -> AdminUser:
    user = authenticate(request, username=email, password=password)
    if user is None:
        logger.info('Failed admin sign-in for %s', email)
        raise InvalidCredentials()

    login(request, user)
    if not check_admin_status(user):
        logout(request)
        logger.warning('User %s signed in without admin rights, signed out', email)
        raise NotAnAdmin()

    logger.info('Admin %s signed in', email)
    return AdminUser.from_user(user)


def sign_out_admin(request):
    email = getattr(request.user, 'email', None)
    logout(request)
    logger.info('Admin %s signed out', email)


def current_admin(request) -> Optional[AdminUser]:
    user = getattr(request, 'user', None)
    if check_admin_status(user):
        return AdminUser.from_user(user)
    return None


def on_auth_change(callback: Callable[[Optional[AdminUser]], None]) -> Callable[[], None]:
    """
    Call ``callback`` with the AdminUser on every sign-in, or None on sign-out
    and on sign-ins of non-admin users. Returns a function that unsubscribes.
    """
    def _logged_in(sender, request, user, **kwargs):
        callback(AdminUser.from_user(user) if check_admin_status(user) else None)

    def _logged_out(sender, request, user, **kwargs):
        callback(None)

    user_logged_in.connect(_logged_in, weak=False)
    user_logged_out.connect(_logged_out, weak=False)

    def unsubscribe():
        user_logged_in.disconnect(_logged_in)
        user_logged_out.disconnect(_logged_out)

    return unsubscribe


def create_admin_user(email, password, confirm_password=None):
    """
    Create a user and register it as admin.
    Raises ValidationError when the password policy is not met or the email is taken.
    """
    if confirm_password is not None and password != confirm_password:
        raise ValidationError('Las contraseñas no coinciden')
    if len(password or '') < 6:
        raise ValidationError('La contraseña debe tener al menos 6 caracteres')

    User = get_user_model()
    if User.objects.filter(email__iexact=email).exists() or User.objects.filter(username=email).exists():
        raise ValidationError('Este email ya está registrado')

    validate_password(password)

    with transaction.atomic():
        user = User.objects.create_user(username=email, email=email, password=password)
        AdminProfile.objects.create(user=user, is_admin=True)

    logger.info('Admin user %s created', email)
    return AdminUser.from_user(user)
