from rest_framework import serializers

from apps.catalog.models import CATEGORY_CHOICES, ParentProduct, ProductVariant
from apps.catalog.models.category import CATEGORIES
from apps.catalog.utils import format_price_clp


# =============================================================================
# Variant Serializers
# =============================================================================

class ProductVariantSerializer(serializers.ModelSerializer):
    """Full variant serializer, used for reads and admin writes."""
    price_display = serializers.SerializerMethodField()
    main_image = serializers.CharField(read_only=True)
    is_in_stock = serializers.BooleanField(read_only=True)
    display_description = serializers.CharField(read_only=True)

    class Meta:
        model = ProductVariant
        fields = [
            'id', 'parent', 'variant_name', 'price', 'price_display',
            'images', 'main_image', 'description', 'display_description', 'dimensions',
            'stock', 'is_in_stock', 'attributes', 'is_default',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['created_at', 'updated_at']
        extra_kwargs = {
            'variant_name': {'error_messages': {'blank': 'Por favor completa todos los campos requeridos'}},
        }

    def get_price_display(self, obj):
        return format_price_clp(obj.price)

    def validate_attributes(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError('Los atributos deben ser un objeto clave/valor')
        cleaned = {}
        for key, raw in value.items():
            if not isinstance(key, str) or not key.strip():
                raise serializers.ValidationError('Nombre de atributo inválido')
            if raw is not None and not isinstance(raw, (str, int, float)):
                raise serializers.ValidationError(f'Valor inválido para el atributo "{key}"')
            cleaned[key.strip()] = '' if raw is None else str(raw)
        return cleaned

    def validate_images(self, value):
        if not isinstance(value, list) or not all(isinstance(url, str) and url for url in value):
            raise serializers.ValidationError('Las imágenes deben ser una lista de URLs')
        return value

    def validate_stock(self, value):
        if value < 0:
            raise serializers.ValidationError('El stock no puede ser negativo')
        return value


class VariantSummarySerializer(serializers.ModelSerializer):
    """Lightweight serializer for product cards."""
    price_display = serializers.SerializerMethodField()
    main_image = serializers.CharField(read_only=True)

    class Meta:
        model = ProductVariant
        fields = [
            'id', 'variant_name', 'price', 'price_display',
            'main_image', 'stock', 'attributes', 'is_default'
        ]

    def get_price_display(self, obj):
        return format_price_clp(obj.price)


# =============================================================================
# Product Serializers
# =============================================================================

class ParentProductSerializer(serializers.ModelSerializer):
    category_display = serializers.CharField(read_only=True)

    class Meta:
        model = ParentProduct
        fields = [
            'id', 'name', 'description', 'category', 'category_display',
            'highlighted', 'age_recommendation', 'created_at', 'updated_at'
        ]
        read_only_fields = ['created_at', 'updated_at']
        extra_kwargs = {
            'name': {'error_messages': {'blank': 'Por favor completa todos los campos requeridos'}},
        }

    def validate_category(self, value):
        valid = {key for key, _ in CATEGORY_CHOICES}
        if value and value not in valid:
            raise serializers.ValidationError('Selecciona una categoría válida')
        return value


class DisplayProductSerializer(serializers.Serializer):
    """A parent product with the variant shown on its card."""
    parent = ParentProductSerializer()
    default_variant = VariantSummarySerializer()


class CategorySerializer(serializers.Serializer):
    key = serializers.CharField()
    name = serializers.CharField()
    emoji = serializers.CharField()


def serialize_categories():
    return CategorySerializer([c._asdict() for c in CATEGORIES], many=True).data


# =============================================================================
# Selection Serializers
# =============================================================================

class AttributeSelectionSerializer(serializers.Serializer):
    """Input of an attribute change on a product page."""
    axis = serializers.CharField(
        error_messages={'required': 'Falta el atributo a cambiar', 'blank': 'Falta el atributo a cambiar'}
    )
    value = serializers.CharField(
        allow_blank=True,
        error_messages={'required': 'Falta el valor del atributo'}
    )


# =============================================================================
# Upload Serializers
# =============================================================================

class ImageDeleteSerializer(serializers.Serializer):
    urls = serializers.ListField(child=serializers.CharField(), allow_empty=True)
