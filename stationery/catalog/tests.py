"""
Test suite for the stationery catalog
Tests: stock validation, percentage classification, add/edit/delete endpoints and role checks
"""
from decimal import Decimal
from unittest import mock
from django.db import DatabaseError
from django.core.exceptions import ValidationError
from django.test import TestCase
from rest_framework import status
from stationery.core.models import AuditLog
from stationery.core.test_utils import TestDataFactory, AuthenticatedAPIClient
from stationery.catalog.models import StationeryItem


class StationeryItemModelTests(TestCase):
    """Test StationeryItem percentage and validation helpers"""

    def test_percent_available_rounds_to_one_decimal(self):
        item = TestDataFactory.create_item(total_stock=3, available_stock=1)
        self.assertEqual(item.get_percent_available(), 33.3)

    def test_stock_level_boundaries(self):
        """19% is red, 20% and 49% are orange, 50% is green"""
        cases = [(19, 'red'), (20, 'orange'), (49, 'orange'), (50, 'green'), (100, 'green'), (0, 'red')]
        for available, expected in cases:
            item = TestDataFactory.create_item(total_stock=100, available_stock=available)
            self.assertEqual(item.get_stock_level(), expected, f'{available}% should be {expected}')

    def test_stock_level_uses_unrounded_percentage(self):
        item = TestDataFactory.create_item(total_stock=10000, available_stock=1999)
        self.assertEqual(item.get_percent_available(), 20.0)
        self.assertEqual(item.get_stock_level(), 'red')

    def test_zero_total_stock_has_no_percentage(self):
        item = TestDataFactory.create_item(total_stock=0, available_stock=0)
        self.assertIsNone(item.get_percent_available())
        self.assertEqual(item.get_stock_level(), 'red')

    def test_available_above_total_rejected(self):
        with self.assertRaises(ValidationError):
            TestDataFactory.create_item(total_stock=5, available_stock=6)
        self.assertEqual(StationeryItem.objects.count(), 0)

    def test_negative_stock_rejected(self):
        with self.assertRaises(ValidationError):
            TestDataFactory.create_item(total_stock=-1, available_stock=0)

    def test_item_str(self):
        item = TestDataFactory.create_item(name='Stapler')
        self.assertEqual(str(item), 'Stapler (OP Stock)')


class StationeryItemAPITests(TestCase):
    """Test the item list/add endpoints"""

    def setUp(self):
        self.staff = TestDataFactory.create_staff()
        self.lecturer = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.staff)

    def test_add_item_appears_in_sorted_list(self):
        """Adding Stapler returns it together with the refetched list, sorted by name"""
        TestDataFactory.create_item(name='Tape')
        TestDataFactory.create_item(name='Binder Clip')
        data = {
            'name': 'Stapler',
            'category': 'OP Stock',
            'totalStock': 10,
            'availableStock': 10,
            'unit': 'pcs',
        }
        response = self.client.post('/api/v1/stationery-items/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['item']['name'], 'Stapler')
        self.assertEqual(response.data['item']['stockLevel'], 'green')
        names = [item['name'] for item in response.data['stationeryItems']]
        self.assertEqual(names, ['Binder Clip', 'Stapler', 'Tape'])

        listed = self.client.get('/api/v1/stationery-items/')
        self.assertEqual(listed.data, response.data['stationeryItems'])

    def test_add_non_stock_item_with_brand_and_price(self):
        data = {
            'name': 'Whiteboard Marker',
            'category': 'OP Non-Stock',
            'totalStock': 20,
            'availableStock': 5,
            'unit': 'box',
            'brand': 'Snowman',
            'unitPrice': '12500.00',
        }
        response = self.client.post('/api/v1/stationery-items/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        item = StationeryItem.objects.get(name='Whiteboard Marker')
        self.assertEqual(item.brand, 'Snowman')
        self.assertEqual(item.unit_price, Decimal('12500.00'))
        self.assertEqual(response.data['item']['percentAvailable'], 25.0)
        self.assertEqual(response.data['item']['stockLevel'], 'orange')

    def test_add_item_requires_name_and_unit(self):
        data = {'name': '  ', 'totalStock': 1, 'availableStock': 1, 'unit': 'pcs'}
        response = self.client.post('/api/v1/stationery-items/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['non_field_errors'], ['Item name and unit are required'])
        self.assertEqual(StationeryItem.objects.count(), 0)

    def test_add_item_available_above_total_rejected(self):
        data = {'name': 'Pen', 'totalStock': 5, 'availableStock': 6, 'unit': 'pcs'}
        response = self.client.post('/api/v1/stationery-items/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['availableStock'], ['Available stock cannot exceed total stock'])
        self.assertEqual(StationeryItem.objects.count(), 0)

    def test_add_item_available_equal_to_total_accepted(self):
        data = {'name': 'Pen', 'totalStock': 5, 'availableStock': 5, 'unit': 'pcs'}
        response = self.client.post('/api/v1/stationery-items/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_add_item_stock_above_column_range_rejected(self):
        data = {'name': 'Pen', 'totalStock': 10 ** 20, 'availableStock': 1, 'unit': 'pcs'}
        response = self.client.post('/api/v1/stationery-items/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('totalStock', response.data)
        self.assertEqual(StationeryItem.objects.count(), 0)

    def test_add_item_negative_stock_rejected(self):
        data = {'name': 'Pen', 'totalStock': -1, 'availableStock': 0, 'unit': 'pcs'}
        response = self.client.post('/api/v1/stationery-items/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('totalStock', response.data)

    def test_add_item_writes_audit_log(self):
        data = {'name': 'Eraser', 'totalStock': 3, 'availableStock': 3, 'unit': 'pcs'}
        self.client.post('/api/v1/stationery-items/', data, format='json')
        log = AuditLog.objects.get(action='create')
        self.assertEqual(log.object_name, 'Eraser')
        self.assertEqual(log.user, self.staff)

    def test_lecturer_cannot_add_item(self):
        self.client.authenticate_user(self.lecturer)
        data = {'name': 'Pen', 'totalStock': 5, 'availableStock': 5, 'unit': 'pcs'}
        response = self.client.post('/api/v1/stationery-items/', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(StationeryItem.objects.count(), 0)

    def test_lecturer_can_list_items(self):
        TestDataFactory.create_item(name='Pen')
        self.client.authenticate_user(self.lecturer)
        response = self.client.get('/api/v1/stationery-items/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

    def test_unauthenticated_request_rejected(self):
        client = AuthenticatedAPIClient()
        response = client.get('/api/v1/stationery-items/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_filter_by_category_and_search(self):
        TestDataFactory.create_item(name='Ballpoint Pen')
        TestDataFactory.create_item(name='Marker', category='OP Non-Stock', brand='Pentel')
        TestDataFactory.create_item(name='Folder', category='OP Non-Stock')

        response = self.client.get('/api/v1/stationery-items/', {'category': 'OP Non-Stock'})
        self.assertEqual([item['name'] for item in response.data], ['Folder', 'Marker'])

        response = self.client.get('/api/v1/stationery-items/', {'search': 'pen'})
        self.assertEqual([item['name'] for item in response.data], ['Ballpoint Pen', 'Marker'])


    def test_invalid_category_filter_rejected(self):
        TestDataFactory.create_item(name='Pen')
        response = self.client.get('/api/v1/stationery-items/', {'category': 'Furniture'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('category', response.data)


class StockEditAPITests(TestCase):
    """Test the inline available-stock edit"""

    def setUp(self):
        self.staff = TestDataFactory.create_staff()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.staff)
        self.item = TestDataFactory.create_item(name='Stapler', total_stock=10, available_stock=8)
        self.url = f'/api/v1/stationery-items/{self.item.id}/stock/'

    def test_update_available_stock(self):
        response = self.client.patch(self.url, {'availableStock': 4}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.item.refresh_from_db()
        self.assertEqual(self.item.available_stock, 4)
        self.assertEqual(response.data['item']['availableStock'], 4)
        self.assertEqual(response.data['stationeryItems'][0]['availableStock'], 4)

    def test_numeric_string_accepted(self):
        response = self.client.patch(self.url, {'availableStock': '10'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.item.refresh_from_db()
        self.assertEqual(self.item.available_stock, 10)

    def test_non_numeric_rejected(self):
        response = self.client.patch(self.url, {'availableStock': 'abc'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['availableStock'], ['Please enter a valid positive number'])
        self.item.refresh_from_db()
        self.assertEqual(self.item.available_stock, 8)

    def test_negative_rejected(self):
        response = self.client.patch(self.url, {'availableStock': -1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['availableStock'], ['Please enter a valid positive number'])

    def test_above_total_rejected(self):
        response = self.client.patch(self.url, {'availableStock': 11}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['availableStock'], ['Available stock cannot exceed total stock (10)'])
        self.item.refresh_from_db()
        self.assertEqual(self.item.available_stock, 8)

    def test_stock_edit_writes_audit_log(self):
        self.client.patch(self.url, {'availableStock': 2}, format='json')
        log = AuditLog.objects.get(action='stock_update')
        self.assertEqual(log.changes, {'available_stock': {'from': 8, 'to': 2}})

    def test_lecturer_cannot_edit_stock(self):
        lecturer = TestDataFactory.create_user()
        self.client.authenticate_user(lecturer)
        response = self.client.patch(self.url, {'availableStock': 1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_unknown_item_returns_404(self):
        response = self.client.patch(
            '/api/v1/stationery-items/00000000-0000-0000-0000-000000000000/stock/',
            {'availableStock': 1}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class StationeryItemDetailAPITests(TestCase):
    """Test item detail, update and delete"""

    def setUp(self):
        self.staff = TestDataFactory.create_staff()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.staff)
        self.item = TestDataFactory.create_item(name='Glue', total_stock=10, available_stock=10)
        self.url = f'/api/v1/stationery-items/{self.item.id}/'

    def test_get_item(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], 'Glue')
        self.assertEqual(response.data['percentAvailable'], 100.0)

    def test_patch_total_below_available_rejected(self):
        response = self.client.patch(self.url, {'totalStock': 5}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.item.refresh_from_db()
        self.assertEqual(self.item.total_stock, 10)

    def test_patch_item(self):
        response = self.client.patch(self.url, {'totalStock': 20, 'unit': 'tube'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.item.refresh_from_db()
        self.assertEqual(self.item.total_stock, 20)
        self.assertEqual(self.item.unit, 'tube')

    def test_delete_unreferenced_item(self):
        response = self.client.delete(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['stationeryItems'], [])
        self.assertTrue(AuditLog.objects.filter(action='delete', object_name='Glue').exists())

    def test_delete_referenced_item_refused(self):
        TestDataFactory.create_order(self.item, user_email='lecturer@campus.test')
        response = self.client.delete(self.url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data['error'],
            'Cannot delete this item because it is already used in orders or reports.'
        )
        self.assertTrue(StationeryItem.objects.filter(pk=self.item.pk).exists())

    def test_delete_item_with_missing_report_refused(self):
        TestDataFactory.create_missing_report(self.item, reported_by=self.staff.email)
        response = self.client.delete(self.url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_delete_store_failure_returns_error(self):
        with mock.patch.object(StationeryItem, 'delete', side_effect=DatabaseError('disk I/O error')):
            response = self.client.delete(self.url)
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['error'], 'Failed to delete item: disk I/O error')
        self.assertTrue(StationeryItem.objects.filter(pk=self.item.pk).exists())
        self.assertFalse(AuditLog.objects.filter(action='delete').exists())

    def test_lecturer_cannot_delete(self):
        self.client.authenticate_user(TestDataFactory.create_user())
        response = self.client.delete(self.url)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(StationeryItem.objects.filter(pk=self.item.pk).exists())
