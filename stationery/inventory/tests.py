"""
Test suite for missing-item reports
"""
from datetime import timedelta
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from stationery.core.test_utils import TestDataFactory, AuthenticatedAPIClient
from stationery.inventory.models import MissingReport

URL = '/api/v1/missing-reports/'


class MissingReportAPITests(TestCase):

    def setUp(self):
        self.staff = TestDataFactory.create_staff(email='staff@campus.test')
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.staff)
        self.item = TestDataFactory.create_item(name='Scissors', total_stock=10, available_stock=7)

    def _age_existing_reports(self, count):
        """Create reports dated in the past, oldest first"""
        now = timezone.now()
        for index in range(count):
            report = TestDataFactory.create_missing_report(self.item, self.staff.email, notes=f'old {index}')
            MissingReport.objects.filter(pk=report.pk).update(date=now - timedelta(days=count - index))

    def test_report_appended_and_listed_first(self):
        """A new report shows at the top of the five most recent"""
        self._age_existing_reports(6)
        data = {'itemId': str(self.item.id), 'quantity': 2, 'notes': 'found empty box'}
        response = self.client.post(URL, data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['report']['reportedBy'], 'staff@campus.test')
        self.assertEqual(response.data['report']['itemName'], 'Scissors')

        recent = response.data['recentMissingReports']
        self.assertEqual(len(recent), 5)
        self.assertEqual(recent[0]['notes'], 'found empty box')
        self.assertEqual(recent[1]['notes'], 'old 5')
        self.assertEqual(len(response.data['missingReports']), 7)

    def test_report_does_not_change_stock(self):
        data = {'itemId': str(self.item.id), 'quantity': 3, 'notes': 'lost'}
        self.client.post(URL, data, format='json')
        self.item.refresh_from_db()
        self.assertEqual(self.item.available_stock, 7)
        self.assertEqual(self.item.total_stock, 10)

    def test_validation_messages(self):
        response = self.client.post(URL, {'quantity': 1, 'notes': 'x'}, format='json')
        self.assertEqual(response.data['itemId'], ['Please select a stationery item'])

        response = self.client.post(URL, {'itemId': str(self.item.id), 'quantity': 0, 'notes': 'x'}, format='json')
        self.assertEqual(response.data['quantity'], ['Please enter a valid quantity'])

        response = self.client.post(URL, {'itemId': str(self.item.id), 'quantity': 1, 'notes': ' '}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['notes'], ['Please provide notes about the missing item'])
        self.assertEqual(MissingReport.objects.count(), 0)

    def test_quantity_above_column_range_rejected(self):
        data = {'itemId': str(self.item.id), 'quantity': 10 ** 20, 'notes': 'whole shelf gone'}
        response = self.client.post(URL, data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('quantity', response.data)
        self.assertEqual(MissingReport.objects.count(), 0)

    def test_list_with_limit(self):
        self._age_existing_reports(4)
        response = self.client.get(URL, {'limit': 2})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([report['notes'] for report in response.data], ['old 3', 'old 2'])

    def test_invalid_limit_rejected(self):
        response = self.client.get(URL, {'limit': 'abc'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_lecturer_cannot_report_or_list(self):
        self.client.authenticate_user(TestDataFactory.create_user())
        data = {'itemId': str(self.item.id), 'quantity': 1, 'notes': 'gone'}
        self.assertEqual(self.client.post(URL, data, format='json').status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.client.get(URL).status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(MissingReport.objects.count(), 0)
