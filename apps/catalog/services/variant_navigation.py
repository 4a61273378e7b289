"""
Service for building attribute selectors and resolving attribute selections
to a concrete variant.
Attribute axes are INFERRED from the variants' attribute bags, not configured.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

logger = logging.getLogger(__name__)

# Normalized value for a missing or empty attribute.
STANDARD_VALUE = '__STANDARD_ATTR_VALUE__'
STANDARD_DISPLAY = 'Estándar'


@dataclass
class AttributeValue:
    normalized_value: str
    original_value: str
    representative_variant: Any

    @property
    def is_standard(self) -> bool:
        return self.normalized_value == STANDARD_VALUE


@dataclass
class SelectionResult:
    """Outcome of an attribute change. ``variant`` is the previous one when nothing matched."""
    variant: Any
    matched: bool
    attributes: Dict[str, str] = field(default_factory=dict)


def _is_blank(raw) -> bool:
    return raw is None or raw == ''


def normalize_attribute_value(raw) -> str:
    if _is_blank(raw) or raw == STANDARD_VALUE:
        return STANDARD_VALUE
    return str(raw).lower()


def display_attribute_value(raw) -> str:
    if _is_blank(raw):
        return STANDARD_DISPLAY
    return str(raw)


def _attributes_of(variant) -> Dict[str, Any]:
    return getattr(variant, 'attributes', None) or {}


def normalized_attributes(variant, axes: Iterable[str]) -> Dict[str, str]:
    """Normalized attribute bag of ``variant`` over ``axes``; absent axes become the sentinel."""
    attrs = _attributes_of(variant)
    return {axis: normalize_attribute_value(attrs.get(axis)) for axis in axes}


def _sort_key(value: AttributeValue):
    if value.is_standard:
        return (0, '', '')
    return (1, value.original_value.casefold(), value.original_value)


class VariantNavigationService:
    """
    Builds attribute selectors for a product page and maps a selector change
    back to a variant.
    """

    @staticmethod
    def build_attribute_index(variants: Sequence[Any]) -> Dict[str, List[AttributeValue]]:
        """
        Derive the attribute axes of a set of variants.

        Example:
            variants = [{color: "Rojo"}, {color: "azul"}, {color: "rojo", size: "M"}]
            -> {
                "color": [azul, Rojo],          # "rojo" deduplicated into "Rojo"
                "size": [Estándar, M],          # first two variants have no size
            }

        Each value keeps the first variant seen with it as representative
        (used for its thumbnail and price preview).

        Args:
            variants: Variants in display order

        Returns:
            Dict of {axis: [AttributeValue, ...]} with the sentinel first and
            the rest sorted case-insensitively by display text
        """
        axes = set()
        for variant in variants:
            axes.update(_attributes_of(variant).keys())

        index = {}
        for axis in sorted(axes):
            seen: Dict[str, AttributeValue] = {}
            for variant in variants:
                raw = _attributes_of(variant).get(axis)
                normalized = normalize_attribute_value(raw)
                if normalized not in seen:
                    seen[normalized] = AttributeValue(
                        normalized_value=normalized,
                        original_value=display_attribute_value(raw),
                        representative_variant=variant,
                    )
            index[axis] = sorted(seen.values(), key=_sort_key)

        return index

    @staticmethod
    def should_show_selector(variants: Sequence[Any], index: Dict[str, List[AttributeValue]]) -> bool:
        """The selector is only rendered when there is something to choose."""
        return bool(index) and len(variants) > 1

    @staticmethod
    def select_variant(
        current_variant,
        axis: str,
        new_value: str,
        variants: Sequence[Any],
        axes: Optional[Iterable[str]] = None,
    ) -> SelectionResult:
        """
        Resolve a change of one attribute to the variant matching the new combination.

        The other axes keep the values of ``current_variant``, so changing "size"
        while "color" is "rojo" only matches red variants.

        Args:
            current_variant: The currently selected variant
            axis: The attribute being changed
            new_value: Normalized value chosen for ``axis``
            variants: All variants of the product, in display order
            axes: Axes to compare on; defaults to every axis of ``variants``

        Returns:
            SelectionResult with the first matching variant, or the current
            variant and ``matched=False`` when no variant has that combination
        """
        if axes is None:
            axes = VariantNavigationService.build_attribute_index(variants).keys()
        axes = list(axes)
        if axis not in axes:
            axes.append(axis)

        wanted = normalized_attributes(current_variant, axes)
        wanted[axis] = normalize_attribute_value(new_value)

        for variant in variants:
            if normalized_attributes(variant, axes) == wanted:
                return SelectionResult(variant=variant, matched=True, attributes=wanted)

        logger.warning('No variant found matching attributes: %s', wanted)
        return SelectionResult(variant=current_variant, matched=False, attributes=wanted)

    @staticmethod
    def find_default_variant(variants: Sequence[Any]):
        """The variant flagged as default, else the first one. None for an empty list."""
        for variant in variants:
            if getattr(variant, 'is_default', False):
                return variant
        return variants[0] if variants else None

    @staticmethod
    def get_navigation_data(variants: Sequence[Any], selected_variant) -> List[Dict[str, Any]]:
        """
        Build the attribute selector structure for a product page.
        Marks the option matching ``selected_variant`` on each axis.
        """
        index = VariantNavigationService.build_attribute_index(variants)
        current = normalized_attributes(selected_variant, index.keys()) if selected_variant else {}

        navigation = []
        for axis, values in index.items():
            navigation.append({
                'axis': axis,
                'selected_value': current.get(axis),
                'options': [
                    {
                        'value': value.normalized_value,
                        'display_value': value.original_value,
                        'is_standard': value.is_standard,
                        'is_selected': current.get(axis) == value.normalized_value,
                        'representative_variant_id': value.representative_variant.id,
                        'representative_price': getattr(value.representative_variant, 'price', None),
                        'representative_image': getattr(value.representative_variant, 'main_image', None),
                    }
                    for value in values
                ],
            })
        return navigation
