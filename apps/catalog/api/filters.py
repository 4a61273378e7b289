from django.db.models.fields.json import KeyTextTransform
from django_filters import rest_framework as filters

from apps.catalog.models import ProductVariant


class VariantFilter(filters.FilterSet):
    """Filter for variants with support for free-form attributes."""

    parent = filters.NumberFilter(field_name='parent__id')

    # Price filters
    min_price = filters.NumberFilter(field_name='price', lookup_expr='gte')
    max_price = filters.NumberFilter(field_name='price', lookup_expr='lte')

    # Stock filters
    in_stock = filters.BooleanFilter(method='filter_in_stock')

    # Attribute filters
    attribute = filters.CharFilter(method='filter_by_attribute')

    class Meta:
        model = ProductVariant
        fields = ['parent', 'is_default']

    def filter_in_stock(self, queryset, name, value):
        if value is True:
            return queryset.filter(stock__gt=0)
        elif value is False:
            return queryset.filter(stock__lte=0)
        return queryset

    def filter_by_attribute(self, queryset, name, value):
        """
        Filter by attribute in format: attribute:value (case-insensitive value)
        Example: ?attribute=color:rojo
        """
        if ':' not in value:
            return queryset

        key, option_value = value.split(':', 1)
        return queryset.annotate(
            _attribute_value=KeyTextTransform(key, 'attributes')
        ).filter(_attribute_value__iexact=option_value)
