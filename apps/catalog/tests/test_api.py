"""
Tests for the catalog REST API.
"""

import io
from unittest import mock

from django.contrib.auth import get_user_model
from django.core.files.storage import InMemoryStorage
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework import status
from rest_framework.test import APITestCase

from apps.accounts.models import AdminProfile
from apps.catalog.models import ParentProduct, ProductVariant

PARENTS_URL = '/api/catalog/parents/'
VARIANTS_URL = '/api/catalog/variants/'


class CatalogAPITestCase(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.mesa = ParentProduct.objects.create(
            name='Mesa de Actividades',
            description='Mesa de madera para jugar y crear',
            category='play-corners',
            highlighted=True,
        )
        cls.rojo_s = ProductVariant.objects.create(
            parent=cls.mesa, variant_name='Roja S', price=89990, stock=2,
            attributes={'color': 'Rojo', 'size': 'S'}, images=['/media/products/roja-s.jpg'],
            is_default=True,
        )
        cls.rojo_m = ProductVariant.objects.create(
            parent=cls.mesa, variant_name='Roja M', price=99990, stock=0,
            attributes={'color': 'Rojo', 'size': 'M'},
        )
        cls.azul_s = ProductVariant.objects.create(
            parent=cls.mesa, variant_name='Azul S', price=89990, stock=5,
            attributes={'color': 'Azul', 'size': 'S'}, description='Edición azul pintada a mano',
        )
        cls.bici = ParentProduct.objects.create(name='Bicicleta de Equilibrio', category='on-the-move')
        ProductVariant.objects.create(parent=cls.bici, variant_name='Natural', price=59990, stock=1)
        cls.vacio = ParentProduct.objects.create(name='Producto sin variantes', category='on-the-move')

        User = get_user_model()
        cls.admin = User.objects.create_user(username='admin@santis.cl', email='admin@santis.cl', password='montessori')
        AdminProfile.objects.create(user=cls.admin)
        cls.customer = User.objects.create_user(username='cliente@gmail.com', email='cliente@gmail.com', password='montessori')

    def detail_url(self, parent, suffix=''):
        return f'{PARENTS_URL}{parent.pk}/{suffix}'


class ProductListTests(CatalogAPITestCase):
    def test_grouped_listing(self):
        response = self.client.get(PARENTS_URL)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['mode'], 'grouped')
        categories = {c['key']: c for c in response.data['categories']}
        self.assertEqual(
            [c['key'] for c in response.data['categories']],
            ['highlighted', 'early-childhood', 'on-the-move', 'play-corners', 'exploration-and-climbing']
        )
        self.assertEqual(
            [p['parent']['name'] for p in categories['highlighted']['products']],
            ['Mesa de Actividades']
        )
        self.assertEqual(
            [p['parent']['name'] for p in categories['on-the-move']['products']],
            ['Bicicleta de Equilibrio']
        )
        card = categories['play-corners']['products'][0]
        self.assertEqual(card['default_variant']['id'], self.rojo_s.pk)
        self.assertEqual(card['default_variant']['price_display'], '$ 89.990')

    def test_search(self):
        response = self.client.get(PARENTS_URL, {'search': 'MESA'})

        self.assertEqual(response.data['mode'], 'search')
        self.assertEqual([p['parent']['name'] for p in response.data['results']], ['Mesa de Actividades'])

    def test_category_page(self):
        response = self.client.get(PARENTS_URL, {'category': 'on-the-move'})

        self.assertEqual(response.data['mode'], 'category')
        self.assertEqual(response.data['category']['name'], 'En movimiento')
        self.assertEqual(len(response.data['results']), 1)

    def test_unknown_category_page(self):
        response = self.client.get(PARENTS_URL, {'category': 'juguetes'})
        self.assertEqual(response.data['category']['name'], 'Categoría no encontrada')
        self.assertEqual(response.data['results'], [])

    def test_categories_endpoint(self):
        response = self.client.get('/api/catalog/categories/')
        self.assertEqual(len(response.data), 5)
        self.assertEqual(response.data[0], {'key': 'highlighted', 'name': 'Destacados', 'emoji': '🌟'})


class ProductPageTests(CatalogAPITestCase):
    def test_default_variant_is_written_to_location(self):
        response = self.client.get(self.detail_url(self.mesa))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['selected_variant']['id'], self.rojo_s.pk)
        self.assertEqual(response.data['location'], f'variantId={self.rojo_s.pk}')
        self.assertTrue(response.data['location_changed'])
        self.assertTrue(response.data['show_selector'])
        self.assertEqual(response.data['main_image'], '/media/products/roja-s.jpg')
        self.assertEqual(response.data['price_display'], '$ 89.990')
        self.assertTrue(response.data['whatsapp_url'].startswith('https://wa.me/'))

    def test_variant_from_location(self):
        response = self.client.get(self.detail_url(self.mesa), {'variantId': self.azul_s.pk, 'ref': 'ig'})

        self.assertEqual(response.data['selected_variant']['id'], self.azul_s.pk)
        self.assertFalse(response.data['location_changed'])
        self.assertIn('ref=ig', response.data['location'])
        self.assertEqual(response.data['main_image'], '/placeholder.svg')

    def test_variant_without_description_uses_parent_text(self):
        response = self.client.get(self.detail_url(self.mesa), {'variantId': self.rojo_s.pk})

        self.assertEqual(response.data['selected_variant']['description'], '')
        self.assertEqual(
            response.data['selected_variant']['display_description'],
            'Mesa de madera para jugar y crear'
        )

    def test_variant_description_overrides_parent_text(self):
        response = self.client.get(self.detail_url(self.mesa), {'variantId': self.azul_s.pk})

        self.assertEqual(
            response.data['selected_variant']['display_description'],
            'Edición azul pintada a mano'
        )

    def test_attribute_selectors(self):
        response = self.client.get(self.detail_url(self.mesa), {'variantId': self.rojo_m.pk})

        attributes = {a['axis']: a for a in response.data['attributes']}
        self.assertEqual(list(attributes), ['color', 'size'])
        self.assertEqual(attributes['size']['selected_value'], 'm')
        self.assertEqual([o['value'] for o in attributes['color']['options']], ['azul', 'rojo'])

    def test_single_variant_hides_selector(self):
        response = self.client.get(self.detail_url(self.bici))
        self.assertFalse(response.data['show_selector'])

    def test_unknown_product(self):
        response = self.client.get(f'{PARENTS_URL}9999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['detail'], 'Producto no encontrado.')

    def test_product_without_variants(self):
        response = self.client.get(self.detail_url(self.vacio))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class SelectAttributeTests(CatalogAPITestCase):
    def test_change_color_keeps_size(self):
        response = self.client.get(
            self.detail_url(self.mesa, 'select/'),
            {'variantId': self.rojo_s.pk, 'axis': 'color', 'value': 'azul'}
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['matched'])
        self.assertEqual(response.data['selected_variant']['id'], self.azul_s.pk)
        self.assertEqual(response.data['location'], f'variantId={self.azul_s.pk}')

    def test_missing_combination_keeps_selection(self):
        response = self.client.get(
            self.detail_url(self.mesa, 'select/'),
            {'variantId': self.rojo_m.pk, 'axis': 'color', 'value': 'azul'}
        )

        self.assertFalse(response.data['matched'])
        self.assertEqual(response.data['selected_variant']['id'], self.rojo_m.pk)
        self.assertEqual(response.data['requested_attributes'], {'color': 'azul', 'size': 'm'})
        self.assertFalse(response.data['location_changed'])

    def test_axis_is_required(self):
        response = self.client.get(self.detail_url(self.mesa, 'select/'), {'value': 'azul'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class AdminWriteTests(CatalogAPITestCase):
    def test_anonymous_cannot_create(self):
        response = self.client.post(PARENTS_URL, {'name': 'Torre'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_customer_cannot_create(self):
        self.client.force_authenticate(self.customer)
        response = self.client.post(PARENTS_URL, {'name': 'Torre'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_creates_parent(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            PARENTS_URL,
            {'name': 'Torre de Aprendizaje', 'category': 'early-childhood', 'age_recommendation': '18m+'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['category_display'], '🧸 Primera infancia')
        self.assertTrue(ParentProduct.objects.filter(name='Torre de Aprendizaje').exists())

    def test_invalid_category(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(PARENTS_URL, {'name': 'Torre', 'category': 'highlighted'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_admin_creates_variant(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            VARIANTS_URL,
            {
                'parent': self.bici.pk,
                'variant_name': 'Roja',
                'price': 64990,
                'stock': 2,
                'attributes': {'color': 'Roja'},
                'images': [],
            },
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['parent'], self.bici.pk)
        self.assertEqual(self.bici.variants.count(), 2)

    def test_negative_stock_rejected(self):
        self.client.force_authenticate(self.admin)
        response = self.client.patch(f'{VARIANTS_URL}{self.azul_s.pk}/', {'stock': -1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_admin_updates_variant(self):
        self.client.force_authenticate(self.admin)
        response = self.client.patch(f'{VARIANTS_URL}{self.azul_s.pk}/', {'price': 79990}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['price_display'], '$ 79.990')

    def test_delete_parent_cascades(self):
        self.client.force_authenticate(self.admin)
        response = self.client.delete(self.detail_url(self.mesa))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(ProductVariant.objects.filter(parent_id=self.mesa.pk).exists())


class VariantFilterTests(CatalogAPITestCase):
    def test_filter_by_attribute(self):
        response = self.client.get(VARIANTS_URL, {'attribute': 'color:azul'})
        self.assertEqual([v['id'] for v in response.data], [self.azul_s.pk])

    def test_filter_in_stock(self):
        response = self.client.get(VARIANTS_URL, {'parent': self.mesa.pk, 'in_stock': 'true'})
        self.assertEqual(
            sorted(v['id'] for v in response.data),
            sorted([self.rojo_s.pk, self.azul_s.pk])
        )

    def test_filter_by_price(self):
        response = self.client.get(VARIANTS_URL, {'min_price': 90000})
        self.assertEqual([v['id'] for v in response.data], [self.rojo_m.pk])


class ImageUploadAPITests(CatalogAPITestCase):
    def setUp(self):
        self.storage = InMemoryStorage(base_url='/media/')
        patcher = mock.patch('apps.catalog.services.storage.default_storage', self.storage)
        patcher.start()
        self.addCleanup(patcher.stop)

    def png(self, name):
        buffer = io.BytesIO()
        Image.new('RGB', (20, 20)).save(buffer, format='PNG')
        return SimpleUploadedFile(name, buffer.getvalue(), content_type='image/png')

    def test_admin_only(self):
        self.client.force_authenticate(self.customer)
        response = self.client.post('/api/catalog/uploads/', {'images': [self.png('a.png')]}, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_upload_and_delete(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            '/api/catalog/uploads/',
            {'images': [self.png('a.png'), self.png('b.png')]},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['uploaded'], 2)

        response = self.client.delete('/api/catalog/uploads/', {'urls': response.data['urls']}, format='json')
        self.assertEqual(response.data, {'deleted': 2})

    def test_invalid_file_type(self):
        self.client.force_authenticate(self.admin)
        upload = SimpleUploadedFile('lista.pdf', b'%PDF-1.4', content_type='application/pdf')
        response = self.client.post('/api/catalog/uploads/', {'images': [upload]}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['detail'], 'Solo se permiten archivos de imagen')

    def test_no_files(self):
        self.client.force_authenticate(self.admin)
        response = self.client.post('/api/catalog/uploads/', {}, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
