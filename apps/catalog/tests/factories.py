"""
Lightweight stand-ins for catalog rows, for tests that don't need the database.
"""

from types import SimpleNamespace

from apps.catalog.services import ProductBundle


def make_variant(id, attributes=None, images=None, is_default=False, price=10000, variant_name=None):
    images = list(images or [])
    return SimpleNamespace(
        id=id,
        pk=id,
        variant_name=variant_name or f'Variante {id}',
        attributes=attributes or {},
        images=images,
        main_image=images[0] if images else '/placeholder.svg',
        is_default=is_default,
        price=price,
    )


def make_parent(id, name, category='play-corners', highlighted=False, description=''):
    return SimpleNamespace(
        id=id,
        pk=id,
        name=name,
        category=category,
        highlighted=highlighted,
        description=description,
    )


class FakeCatalogClient:
    """In-memory client that records every fetch."""

    def __init__(self):
        self.parents = {}
        self.variants = {}
        self.fetches = []

    def add(self, parent, variants):
        self.parents[parent.pk] = parent
        self.variants[parent.pk] = list(variants)

    def list_parents(self):
        return list(self.parents.values())

    def list_variants(self, parent_id):
        return list(self.variants.get(parent_id, []))

    def get_parent_and_variants(self, parent_id):
        self.fetches.append(parent_id)
        parent = self.parents.get(parent_id)
        if parent is None:
            return None
        return ProductBundle(parent=parent, variants=self.list_variants(parent_id))
