"""
Catalog backend client.

A single CatalogClient is built when the catalog app is ready and handed to
every service and view that reads or writes catalog data.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import List, Optional

from django.apps import apps
from django.conf import settings
from django.db import DatabaseError, transaction

from apps.catalog.exceptions import BackendNotConfigured, BackendUnavailable, ProductNotFound
from apps.catalog.models import ParentProduct, ProductVariant

logger = logging.getLogger(__name__)

PARENT_READ_ONLY_FIELDS = {'id', 'pk', 'created_at', 'updated_at'}
VARIANT_READ_ONLY_FIELDS = PARENT_READ_ONLY_FIELDS | {'parent', 'parent_id'}


@dataclass
class ProductBundle:
    parent: ParentProduct
    variants: List[ProductVariant] = field(default_factory=list)


def get_catalog_client():
    """The client built at application start."""
    return apps.get_app_config('catalog').client


class CatalogClient:
    """
    Reads and writes parents and variants.

    Database errors are logged and re-raised as BackendUnavailable with a
    message fit for the customer.
    """

    def __init__(self, using='default'):
        self.using = using

    def is_configured(self):
        database = settings.DATABASES.get(self.using) or {}
        configured = bool(database.get('ENGINE') and database.get('NAME')) and bool(settings.MEDIA_URL)
        if not configured:
            logger.error('Catalog backend is not configured (database alias %r)', self.using)
        return configured

    @contextmanager
    def _backend(self, message):
        if not self.is_configured():
            raise BackendNotConfigured()
        try:
            yield
        except DatabaseError as e:
            logger.exception('Catalog backend error: %s', e)
            raise BackendUnavailable(message) from e

    def _parents(self):
        return ParentProduct.objects.using(self.using)

    def _variants(self):
        return ProductVariant.objects.using(self.using)

    # -------------------------------------------------------------------------
    # Read
    # -------------------------------------------------------------------------

    def list_parents(self) -> List[ParentProduct]:
        with self._backend('Error al cargar productos. Por favor intenta de nuevo.'):
            parents = list(self._parents().order_by('name'))
        logger.info('Loaded %s parent products', len(parents))
        return parents

    def get_parent(self, parent_id) -> Optional[ParentProduct]:
        with self._backend('Error al cargar el producto. Por favor intenta de nuevo.'):
            parent = self._parents().filter(pk=parent_id).first()
        if parent is None:
            logger.info('Parent product %s not found', parent_id)
        return parent

    def list_variants(self, parent_id) -> List[ProductVariant]:
        with self._backend('Error al cargar las variantes del producto. Por favor intenta de nuevo.'):
            variants = list(
                self._variants().filter(parent_id=parent_id).order_by('variant_name', 'pk')
            )
        logger.info('Loaded %s variants for parent product %s', len(variants), parent_id)
        return variants

    def get_parent_and_variants(self, parent_id) -> Optional[ProductBundle]:
        parent = self.get_parent(parent_id)
        if parent is None:
            return None
        return ProductBundle(parent=parent, variants=self.list_variants(parent_id))

    # -------------------------------------------------------------------------
    # Write
    # -------------------------------------------------------------------------

    def create_parent(self, **data) -> ParentProduct:
        with self._backend('Error al agregar producto. Verifica tus permisos.'):
            parent = self._parents().create(**data)
        logger.info('Created parent product %s', parent.pk)
        return parent

    def update_parent(self, parent_id, **updates) -> ParentProduct:
        with self._backend('Error al actualizar producto. Verifica tus permisos.'):
            parent = self._parents().filter(pk=parent_id).first()
            if parent is None:
                raise ProductNotFound()
            for name, value in updates.items():
                if name not in PARENT_READ_ONLY_FIELDS:
                    setattr(parent, name, value)
            parent.save(using=self.using)
        logger.info('Updated parent product %s', parent_id)
        return parent

    def delete_parent(self, parent_id):
        """
        Delete a parent together with its variants. Variant image files are
        removed by the post_delete signal.
        """
        with self._backend('Error al eliminar producto. Verifica tus permisos.'):
            with transaction.atomic(using=self.using):
                parent = self._parents().filter(pk=parent_id).first()
                if parent is None:
                    raise ProductNotFound()
                deleted, _ = parent.delete()
        logger.info('Deleted parent product %s (%s rows)', parent_id, deleted)
        return deleted

    def create_variant(self, parent_id, **data) -> ProductVariant:
        with self._backend('Error al agregar variante del producto. Verifica tus permisos.'):
            if not self._parents().filter(pk=parent_id).exists():
                raise ProductNotFound()
            data.pop('parent', None)
            data.pop('parent_id', None)
            variant = self._variants().create(parent_id=parent_id, **data)
        logger.info('Created variant %s for parent product %s', variant.pk, parent_id)
        return variant

    def update_variant(self, parent_id, variant_id, **updates) -> ProductVariant:
        with self._backend('Error al actualizar variante del producto. Verifica tus permisos.'):
            variant = self._variants().filter(pk=variant_id, parent_id=parent_id).first()
            if variant is None:
                raise ProductNotFound('Variante no encontrada.')
            for name, value in updates.items():
                if name not in VARIANT_READ_ONLY_FIELDS:
                    setattr(variant, name, value)
            variant.save(using=self.using)
        logger.info('Updated variant %s of parent product %s', variant_id, parent_id)
        return variant

    def delete_variant(self, parent_id, variant_id):
        with self._backend('Error al eliminar variante del producto. Verifica tus permisos.'):
            variant = self._variants().filter(pk=variant_id, parent_id=parent_id).first()
            if variant is None:
                raise ProductNotFound('Variante no encontrada.')
            variant.delete()
        logger.info('Deleted variant %s of parent product %s', variant_id, parent_id)
