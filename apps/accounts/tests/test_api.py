from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APITestCase

from apps.accounts.services import create_admin_user

LOGIN_URL = '/api/accounts/login/'
LOGOUT_URL = '/api/accounts/logout/'
ME_URL = '/api/accounts/me/'


class LoginAPITests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        create_admin_user('admin@santis.cl', 'montessori')
        get_user_model().objects.create_user(
            username='cliente@gmail.com', email='cliente@gmail.com', password='montessori'
        )

    def test_admin_login(self):
        response = self.client.post(LOGIN_URL, {'email': 'admin@santis.cl', 'password': 'montessori'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['email'], 'admin@santis.cl')
        self.assertTrue(response.data['is_admin'])
        self.assertEqual(self.client.get(ME_URL).data['admin']['email'], 'admin@santis.cl')

    def test_wrong_password(self):
        response = self.client.post(LOGIN_URL, {'email': 'admin@santis.cl', 'password': 'otra-clave'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['detail'], 'Email o contraseña incorrectos')

    def test_non_admin_is_signed_out(self):
        response = self.client.post(LOGIN_URL, {'email': 'cliente@gmail.com', 'password': 'montessori'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['detail'], 'No tienes permisos de administrador')
        self.assertIsNone(self.client.get(ME_URL).data['admin'])

    def test_missing_fields(self):
        response = self.client.post(LOGIN_URL, {'email': ''}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['email'], ['Por favor completa todos los campos'])

    def test_logout(self):
        self.client.post(LOGIN_URL, {'email': 'admin@santis.cl', 'password': 'montessori'}, format='json')

        response = self.client.post(LOGOUT_URL)

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertIsNone(self.client.get(ME_URL).data['admin'])
