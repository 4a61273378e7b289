import getpass

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from apps.accounts.services import create_admin_user


class Command(BaseCommand):
    help = 'Crea un usuario administrador de la tienda'

    def add_arguments(self, parser):
        parser.add_argument('email')
        parser.add_argument('--password', help='Contraseña (se pregunta si se omite)')

    def handle(self, *args, **options):
        email = options['email']
        password = options['password']
        confirm = password
        if not password:
            password = getpass.getpass('Contraseña (mínimo 6 caracteres): ')
            confirm = getpass.getpass('Confirmar contraseña: ')

        try:
            admin = create_admin_user(email, password, confirm)
        except ValidationError as e:
            raise CommandError('; '.join(e.messages)) from e

        self.stdout.write(self.style.SUCCESS(f'Usuario administrador creado: {admin.email} (UID {admin.uid})'))
        self.stdout.write('Ahora puedes iniciar sesión en /api/accounts/login/')
