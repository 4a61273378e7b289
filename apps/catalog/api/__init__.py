from .serializers import (
    DisplayProductSerializer,
    ParentProductSerializer,
    ProductVariantSerializer,
    VariantSummarySerializer,
)

__all__ = [
    'DisplayProductSerializer',
    'ParentProductSerializer',
    'ProductVariantSerializer',
    'VariantSummarySerializer',
]
