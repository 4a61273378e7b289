from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.catalog'
    verbose_name = 'Catálogo'

    client = None

    def ready(self):
        from . import signals  # noqa: F401
        from .services.catalog_client import CatalogClient

        self.client = CatalogClient()
