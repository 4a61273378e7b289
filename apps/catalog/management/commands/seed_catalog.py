"""
Create a small sample catalog to try the storefront locally.
Run with: python manage.py seed_catalog
"""

from django.core.management.base import BaseCommand

from apps.catalog.models import ParentProduct, ProductVariant
from apps.catalog.services import get_catalog_client

SAMPLE_PRODUCTS = [
    {
        'name': 'Mesa de Actividades',
        'description': 'Mesa de madera con espacio de guardado para jugar, pintar y crear.',
        'category': 'play-corners',
        'highlighted': True,
        'age_recommendation': '2 años+',
        'variants': [
            {'variant_name': 'Natural S', 'price': 89990, 'stock': 4,
             'attributes': {'color': 'Natural', 'size': 'S'}, 'is_default': True},
            {'variant_name': 'Natural M', 'price': 99990, 'stock': 2,
             'attributes': {'color': 'Natural', 'size': 'M'}},
            {'variant_name': 'Blanca S', 'price': 94990, 'stock': 0,
             'attributes': {'color': 'Blanca', 'size': 'S'}},
        ],
    },
    {
        'name': 'Torre de Aprendizaje',
        'description': 'Plataforma segura para que los niños participen en la cocina.',
        'category': 'early-childhood',
        'age_recommendation': '18 meses+',
        'variants': [
            {'variant_name': 'Natural', 'price': 129990, 'stock': 3,
             'attributes': {'color': 'Natural'}},
            {'variant_name': 'Blanca', 'price': 134990, 'stock': 1,
             'attributes': {'color': 'Blanca'}},
        ],
    },
    {
        'name': 'Bicicleta de Equilibrio',
        'description': 'Bicicleta sin pedales de madera.',
        'category': 'on-the-move',
        'highlighted': True,
        'age_recommendation': '3 años+',
        'variants': [
            {'variant_name': 'Estándar', 'price': 59990, 'stock': 6},
        ],
    },
    {
        'name': 'Triángulo Pikler',
        'description': 'Triángulo de escalada plegable con rampa reversible.',
        'category': 'exploration-and-climbing',
        'age_recommendation': '1 año+',
        'variants': [
            {'variant_name': 'Sin rampa', 'price': 149990, 'stock': 2,
             'attributes': {'rampa': ''}},
            {'variant_name': 'Con rampa', 'price': 189990, 'stock': 2,
             'attributes': {'rampa': 'Reversible'}, 'is_default': True},
        ],
    },
]


class Command(BaseCommand):
    help = 'Crea productos de ejemplo (se omiten los que ya existen)'

    def handle(self, *args, **options):
        client = get_catalog_client()
        created = 0

        for product in SAMPLE_PRODUCTS:
            data = dict(product)
            variants = data.pop('variants')
            if ParentProduct.objects.filter(name=data['name']).exists():
                self.stdout.write(f'  = {data["name"]} ya existe')
                continue

            parent = client.create_parent(**data)
            for variant in variants:
                client.create_variant(parent.pk, **variant)
            created += 1
            self.stdout.write(f'  + {parent.name} ({len(variants)} variantes)')

        self.stdout.write(self.style.SUCCESS(
            f'Listo: {created} productos nuevos, '
            f'{ParentProduct.objects.count()} productos y {ProductVariant.objects.count()} variantes en total'
        ))
