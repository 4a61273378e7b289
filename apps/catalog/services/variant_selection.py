"""
Keeps the selected variant of a product page in step with the shareable
``variantId`` query parameter.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from django.conf import settings
from django.http import QueryDict

from apps.catalog.exceptions import ProductNotFound
from .variant_navigation import SelectionResult, VariantNavigationService

logger = logging.getLogger(__name__)

VARIANT_PARAM = 'variantId'


class SyncState(enum.Enum):
    UNINITIALIZED = 'uninitialized'
    RESOLVING = 'resolving'
    SYNCED = 'synced'


class QueryStringLocation:
    """
    A location reference backed by a query string.

    ``replace`` overwrites a parameter in place (no new history entry) and is
    a no-op when the value is already there. ``writes`` counts effective writes.
    """

    def __init__(self, query=''):
        if isinstance(query, QueryDict):
            self._params = query.copy()
        else:
            self._params = QueryDict(query or '', mutable=True)
        self.writes = 0

    def get(self, name) -> Optional[str]:
        return self._params.get(name) or None

    def replace(self, name, value) -> bool:
        value = str(value)
        if self._params.get(name) == value:
            return False
        self._params[name] = value
        self.writes += 1
        return True

    def set_external(self, name, value=None):
        """Change made outside the page (back/forward navigation, pasted link)."""
        if value is None:
            self._params.pop(name, None)
        else:
            self._params[name] = str(value)

    def urlencode(self) -> str:
        return self._params.urlencode()

    def __str__(self):
        return f'?{self.urlencode()}'


@dataclass
class DisplayState:
    main_image: Optional[str] = None
    is_zoomed: bool = False


class VariantSelectionSynchronizer:
    """
    Selection state of one product page.

    UNINITIALIZED -> RESOLVING when a product id is navigated to,
    RESOLVING -> SYNCED once its data is applied. Every load issues a
    generation token; responses carrying an older token are discarded.
    """

    def __init__(self, client, location, placeholder_image=None):
        self.client = client
        self.location = location
        self.placeholder_image = placeholder_image or settings.STOREFRONT_PLACEHOLDER_IMAGE

        self.state = SyncState.UNINITIALIZED
        self.parent_id = None
        self.parent = None
        self.variants: List[Any] = []
        self.attribute_index = {}
        self.selected_variant = None
        self.display = DisplayState(main_image=self.placeholder_image)
        self._generation = 0

    @property
    def generation(self):
        return self._generation

    def navigate(self, parent_id) -> Optional[int]:
        """
        Start resolving ``parent_id``. Returns the request token, or None when
        that product is already loaded.
        """
        if self.state is SyncState.SYNCED and str(parent_id) == str(self.parent_id):
            return None
        self._generation += 1
        self.parent_id = parent_id
        self.state = SyncState.RESOLVING
        logger.debug('Resolving product %s (request %s)', parent_id, self._generation)
        return self._generation

    def load(self, parent_id):
        """Navigate to ``parent_id``, fetch it and apply the result."""
        token = self.navigate(parent_id)
        if token is None:
            return self.selected_variant
        data = self.client.get_parent_and_variants(parent_id)
        self.apply_loaded(token, data)
        return self.selected_variant

    def apply_loaded(self, token, data) -> bool:
        """
        Apply a fetched ProductBundle. Returns False when ``token`` is stale.
        """
        if token != self._generation:
            logger.info(
                'Discarding stale product response (request %s, latest %s)',
                token, self._generation
            )
            return False

        if data is None or data.parent is None:
            logger.error('Product %s not found', self.parent_id)
            raise ProductNotFound()
        if not data.variants:
            logger.error('Product %s has no variants', self.parent_id)
            raise ProductNotFound('Este producto no tiene variantes disponibles.')

        self.parent = data.parent
        self.variants = list(data.variants)
        self.attribute_index = VariantNavigationService.build_attribute_index(self.variants)
        self.selected_variant = None

        self._set_selection(self._resolve(prefer_current=False))
        self.state = SyncState.SYNCED
        logger.info('Product %s initial variant %s', self.parent_id, self.selected_variant.id)
        return True

    def select_attribute(self, axis, value) -> SelectionResult:
        """
        Change one attribute of the current selection. When no variant has the
        new combination the previous selection (and location) are kept.
        """
        self._require_synced()
        result = VariantNavigationService.select_variant(
            self.selected_variant,
            axis,
            value,
            self.variants,
            axes=self.attribute_index.keys(),
        )
        if result.matched:
            self._set_selection(result.variant)
        return result

    def select_variant_id(self, variant_id) -> bool:
        self._require_synced()
        variant = self._find(variant_id)
        if variant is None:
            logger.warning('Variant %s does not belong to product %s', variant_id, self.parent_id)
            return False
        self._set_selection(variant)
        return True

    def on_location_change(self):
        """
        Re-resolve after the location changed on its own (back/forward).
        Without a usable ``variantId`` the in-memory selection wins over the default.
        """
        self._require_synced()
        self._set_selection(self._resolve(prefer_current=True))
        return self.selected_variant

    def show_image(self, image_url):
        self.display.main_image = image_url
        self.display.is_zoomed = False

    def toggle_zoom(self):
        self.display.is_zoomed = not self.display.is_zoomed
        return self.display.is_zoomed

    def _require_synced(self):
        if self.state is not SyncState.SYNCED:
            raise RuntimeError(f'Selection is not ready (state: {self.state.value})')

    def _find(self, variant_id):
        if variant_id is None:
            return None
        for variant in self.variants:
            if str(variant.id) == str(variant_id):
                return variant
        return None

    def _resolve(self, prefer_current):
        target = self._find(self.location.get(VARIANT_PARAM))
        if target is None and prefer_current and self.selected_variant is not None:
            target = self.selected_variant
        if target is None:
            target = VariantNavigationService.find_default_variant(self.variants)
        return target

    def _set_selection(self, variant):
        previous = self.selected_variant
        self.selected_variant = variant
        if previous is None or previous.id != variant.id:
            self.display.is_zoomed = False
            self.display.main_image = variant.images[0] if variant.images else self.placeholder_image
        self.location.replace(VARIANT_PARAM, variant.id)
