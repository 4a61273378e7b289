"""
Catalog models for the storefront.

Model Hierarchy:
- ParentProduct: The product a customer browses (e.g., "Mesa de Actividades")
- ProductVariant: Purchasable version with price, stock, images and a free-form
  attribute bag (color, size, ...)
"""

from .category import CATEGORIES, CATEGORY_CHOICES, FALLBACK_CATEGORY, HIGHLIGHTED, Category
from .product import ParentProduct
from .variant import ProductVariant

__all__ = [
    'CATEGORIES',
    'CATEGORY_CHOICES',
    'FALLBACK_CATEGORY',
    'HIGHLIGHTED',
    'Category',
    'ParentProduct',
    'ProductVariant',
]
