from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from simple_history.models import HistoricalRecords


class ProductVariant(models.Model):
    """
    A purchasable version of a ParentProduct with its own price, stock and images.
    Variants are told apart by the free-form ``attributes`` bag,
    e.g. {"color": "Rojo", "size": "M"}.
    """
    parent = models.ForeignKey(
        'catalog.ParentProduct',
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name='Producto'
    )
    variant_name = models.CharField(
        max_length=255,
        verbose_name='Nombre de la variante'
    )
    price = models.PositiveIntegerField(
        validators=[MinValueValidator(0)],
        verbose_name='Precio (CLP)'
    )
    images = models.JSONField(
        default=list,
        blank=True,
        verbose_name='Imágenes',
        help_text='Lista ordenada de URLs de imágenes'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Descripción',
        help_text='Reemplaza la descripción del producto (opcional)'
    )
    dimensions = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Dimensiones'
    )
    stock = models.IntegerField(
        default=0,
        verbose_name='Stock'
    )
    attributes = models.JSONField(
        default=dict,
        blank=True,
        verbose_name='Atributos',
        help_text='Atributos libres, ej: {"color": "Rojo", "size": "M"}'
    )
    is_default = models.BooleanField(
        default=False,
        verbose_name='Variante por defecto'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Creado el'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Actualizado el'
    )

    history = HistoricalRecords()

    class Meta:
        ordering = ['variant_name']
        verbose_name = 'Variante'
        verbose_name_plural = 'Variantes'

    def __str__(self):
        return self.variant_name

    @property
    def main_image(self):
        if self.images:
            return self.images[0]
        return settings.STOREFRONT_PLACEHOLDER_IMAGE

    @property
    def display_description(self):
        return self.description or self.parent.description

    @property
    def is_in_stock(self):
        return self.stock > 0
