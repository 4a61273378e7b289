from .catalog_client import CatalogClient, ProductBundle, get_catalog_client
from .category_grouping import (
    DisplayProduct,
    build_display_products,
    filter_by_category,
    group_by_category,
    search_products,
)
from .variant_navigation import (
    STANDARD_DISPLAY,
    STANDARD_VALUE,
    AttributeValue,
    SelectionResult,
    VariantNavigationService,
)
from .variant_selection import (
    VARIANT_PARAM,
    DisplayState,
    QueryStringLocation,
    SyncState,
    VariantSelectionSynchronizer,
)

__all__ = [
    'CatalogClient',
    'ProductBundle',
    'get_catalog_client',
    'DisplayProduct',
    'build_display_products',
    'filter_by_category',
    'group_by_category',
    'search_products',
    'STANDARD_DISPLAY',
    'STANDARD_VALUE',
    'AttributeValue',
    'SelectionResult',
    'VariantNavigationService',
    'VARIANT_PARAM',
    'DisplayState',
    'QueryStringLocation',
    'SyncState',
    'VariantSelectionSynchronizer',
]
