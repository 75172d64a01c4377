from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.catalog.models import Category, Jewellery
from apps.favorites.models import Favorite
from apps.users.models import User


class TestFavorites(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            username='fanuser', password='FanPass1!', email='fan@example.com'
        )
        category = Category.objects.create(name='Earrings')
        self.hoops = Jewellery.objects.create(
            name='Gold Hoops', price=Decimal('75.00'), image_url='hoops.jpg', category=category
        )
        self.studs = Jewellery.objects.create(
            name='Diamond Studs', price=Decimal('450.00'), category=category
        )
        login = self.client.post(
            reverse('auth-login'),
            {'email': 'fan@example.com', 'password': 'FanPass1!'},
            format='json',
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['token']}")

    def test_add_list_and_remove(self):
        res = self.client.post(reverse('favorite-detail', args=[self.hoops.id]))
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertTrue(res.data['isFavorited'])
        listing = self.client.get(reverse('favorite-list'))
        self.assertEqual(len(listing.data), 1)
        self.assertEqual(listing.data[0]['jewellery']['name'], 'Gold Hoops')
        res = self.client.delete(reverse('favorite-detail', args=[self.hoops.id]))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertFalse(res.data['isFavorited'])
        self.assertFalse(Favorite.objects.exists())

    def test_duplicate_is_conflict(self):
        self.client.post(reverse('favorite-detail', args=[self.hoops.id]))
        res = self.client.post(reverse('favorite-detail', args=[self.hoops.id]))
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(res.data['error']['message'], 'Item already in favorites.')

    def test_unknown_jewellery(self):
        res = self.client.post(reverse('favorite-detail', args=[9999]))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_remove_absent(self):
        res = self.client.delete(reverse('favorite-detail', args=[self.studs.id]))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data['error']['message'], 'Item not found in favorites.')

    def test_status(self):
        self.client.post(reverse('favorite-detail', args=[self.hoops.id]))
        res = self.client.get(reverse('favorite-status', args=[self.hoops.id]))
        self.assertEqual(res.data, {'jewelleryId': self.hoops.id, 'isFavorited': True})

    def test_batch_status_accepts_list_and_object(self):
        self.client.post(reverse('favorite-detail', args=[self.hoops.id]))
        expected = {str(self.hoops.id): True, str(self.studs.id): False}
        res = self.client.post(
            reverse('favorite-batch-status'), [self.hoops.id, self.studs.id], format='json'
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, expected)
        res = self.client.post(
            reverse('favorite-batch-status'),
            {'jewelleryIds': [self.hoops.id, self.studs.id]},
            format='json',
        )
        self.assertEqual(res.data, expected)

    def test_requires_authentication(self):
        self.client.credentials()
        res = self.client.get(reverse('favorite-list'))
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
