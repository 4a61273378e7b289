from django.contrib.auth import get_user_model
from django.test import TestCase

from apps.catalog.models import ParentProduct, ProductVariant


class CatalogAdminTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.superuser = get_user_model().objects.create_superuser(
            username='root', email='root@santis.cl', password='montessori'
        )
        cls.parent = ParentProduct.objects.create(name='Mesa de Actividades', category='play-corners')
        cls.natural = ProductVariant.objects.create(
            parent=cls.parent, variant_name='Natural', price=89990, stock=1, is_default=True,
            images=['/media/products/natural.jpg'],
        )
        cls.blanca = ProductVariant.objects.create(parent=cls.parent, variant_name='Blanca', price=94990)

    def setUp(self):
        self.client.force_login(self.superuser)

    def test_changelists_load(self):
        for url in ['/admin/catalog/parentproduct/', '/admin/catalog/productvariant/']:
            response = self.client.get(url)
            self.assertEqual(response.status_code, 200, url)

    def test_parent_change_page_shows_variants(self):
        response = self.client.get(f'/admin/catalog/parentproduct/{self.parent.pk}/change/')
        self.assertContains(response, 'Blanca')

    def test_mark_as_default_action(self):
        self.client.post('/admin/catalog/productvariant/', {
            'action': 'mark_as_default',
            '_selected_action': [self.blanca.pk],
        })

        self.natural.refresh_from_db()
        self.blanca.refresh_from_db()
        self.assertTrue(self.blanca.is_default)
        self.assertFalse(self.natural.is_default)

    def test_mark_out_of_stock_action(self):
        self.client.post('/admin/catalog/productvariant/', {
            'action': 'mark_out_of_stock',
            '_selected_action': [self.natural.pk],
        })

        self.natural.refresh_from_db()
        self.assertEqual(self.natural.stock, 0)
