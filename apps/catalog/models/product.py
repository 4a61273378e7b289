from django.db import models
from simple_history.models import HistoricalRecords

from .category import category_display


class ParentProduct(models.Model):
    """
    The product a customer browses.
    Example: "Mesa de Actividades Montessori", which has color/size variants.
    Prices, stock and images live on the variants.
    """
    name = models.CharField(
        max_length=255,
        verbose_name='Nombre'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Descripción'
    )
    category = models.CharField(
        max_length=100,
        blank=True,
        db_index=True,
        verbose_name='Categoría',
        help_text='Clave de categoría (ej: "on-the-move")'
    )
    highlighted = models.BooleanField(
        default=False,
        verbose_name='Destacado'
    )
    age_recommendation = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='Edad recomendada'
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
        ordering = ['name']
        verbose_name = 'Producto'
        verbose_name_plural = 'Productos'

    def __str__(self):
        return self.name

    @property
    def variant_count(self):
        return self.variants.count()

    @property
    def category_display(self):
        return category_display(self.category)

    def get_default_variant(self):
        """The flagged default variant, or the first one by name."""
        variants = list(self.variants.all())
        for variant in variants:
            if variant.is_default:
                return variant
        return variants[0] if variants else None
