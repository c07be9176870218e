"""
Test suite for authentication, dashboards, audit logs and portal user management
"""
from io import StringIO
from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase, override_settings
from rest_framework import status
from stationery.core.models import AuditLog
from stationery.core.test_utils import TestDataFactory, AuthenticatedAPIClient
from stationery.core.utils import create_audit_log

User = get_user_model()


class AuthTests(TestCase):
    """Test login, refresh, logout and the current-user endpoint"""

    def setUp(self):
        self.user = TestDataFactory.create_user(email='dosen@campus.test', password='secret-pass-1')
        self.client = AuthenticatedAPIClient()

    def _login(self, email='dosen@campus.test', password='secret-pass-1'):
        return self.client.post('/api/v1/auth/login/', {'email': email, 'password': password}, format='json')

    def test_login_returns_tokens_and_session_user(self):
        response = self._login()
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)
        self.assertIn('refresh', response.data)
        self.assertEqual(response.data['user'], {'email': 'dosen@campus.test', 'role': 'lecturer'})

    def test_login_with_campus_id(self):
        TestDataFactory.create_staff(email='198702142019031001', password='nik-pass-123')
        response = self._login(email='198702142019031001', password='nik-pass-123')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['user']['role'], 'staff')

    def test_login_with_wrong_password(self):
        response = self._login(password='wrong')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_inactive_user_cannot_login(self):
        self.user.is_active = False
        self.user.save()
        response = self._login()
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_refresh(self):
        tokens = self._login().data
        response = self.client.post('/api/v1/auth/refresh/', {'refresh': tokens['refresh']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)

    def test_logout_blacklists_refresh_token(self):
        tokens = self._login().data
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
        response = self.client.post('/api/v1/auth/logout/', {'refresh': tokens['refresh']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_205_RESET_CONTENT)

        response = self.client.post('/api/v1/auth/refresh/', {'refresh': tokens['refresh']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_logout_requires_refresh_token(self):
        self.client.authenticate_user(self.user)
        response = self.client.post('/api/v1/auth/logout/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_me(self):
        self.client.authenticate_user(self.user)
        response = self.client.get('/api/v1/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['email'], 'dosen@campus.test')
        self.assertEqual(response.data['dashboard'], 'lecturer')
        self.assertFalse(response.data['is_staff_role'])

    def test_superuser_gets_staff_dashboard(self):
        admin = TestDataFactory.create_user(is_superuser=True)
        self.client.authenticate_user(admin)
        response = self.client.get('/api/v1/auth/me/')
        self.assertEqual(response.data['dashboard'], 'staff')


class DashboardTests(TestCase):
    """Test the role-specific dashboard composition"""

    def setUp(self):
        self.lecturer = TestDataFactory.create_user(email='a@campus.test')
        self.staff = TestDataFactory.create_staff()
        self.client = AuthenticatedAPIClient()
        self.low = TestDataFactory.create_item(name='Glue', total_stock=10, available_stock=1)
        self.ok = TestDataFactory.create_item(name='Pen', total_stock=10, available_stock=8)
        self.empty = TestDataFactory.create_item(name='Toner', total_stock=0, available_stock=0)
        TestDataFactory.create_order(self.ok, self.lecturer.email)
        TestDataFactory.create_order(self.ok, 'other@campus.test')
        TestDataFactory.create_missing_report(self.low, self.staff.email)

    def test_lecturer_dashboard(self):
        self.client.authenticate_user(self.lecturer)
        response = self.client.get('/api/v1/dashboard/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['role'], 'lecturer')
        self.assertEqual(len(response.data['stationeryItems']), 3)
        self.assertEqual(len(response.data['retrievalOrders']), 1)
        self.assertNotIn('recentMissingReports', response.data)
        self.assertNotIn('stats', response.data)

    def test_staff_dashboard(self):
        self.client.authenticate_user(self.staff)
        response = self.client.get('/api/v1/dashboard/')
        self.assertEqual(response.data['role'], 'staff')
        self.assertEqual(len(response.data['retrievalOrders']), 2)
        self.assertEqual(len(response.data['recentMissingReports']), 1)
        self.assertEqual(response.data['stats'], {'totalItems': 3, 'totalStock': 9, 'lowStockItems': 1})

    @override_settings(STATIONERY_CONFIG={'LOW_STOCK_RATIO': 0.9, 'RECENT_MISSING_REPORTS': 5,
                                          'REPORT_TITLE': 'Stationery Inventory Report'})
    def test_low_stock_ratio_is_configurable(self):
        self.client.authenticate_user(self.staff)
        response = self.client.get('/api/v1/dashboard/')
        self.assertEqual(response.data['stats']['lowStockItems'], 2)


class AuditLogTests(TestCase):

    def setUp(self):
        self.staff = TestDataFactory.create_staff()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.staff)

    def test_create_audit_log_skips_incomplete_entries(self):
        self.assertIsNone(create_audit_log(action='create', model_name='StationeryItem', object_id=None))
        self.assertEqual(AuditLog.objects.count(), 0)

    def test_audit_logs_listed_for_staff(self):
        item = TestDataFactory.create_item(name='Pen')
        self.client.patch(f'/api/v1/stationery-items/{item.id}/stock/', {'availableStock': 1}, format='json')
        response = self.client.get('/api/v1/audit-logs/', {'action': 'stock_update'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['object_name'], 'Pen')
        self.assertEqual(response.data[0]['user']['email'], self.staff.email)

    def test_invalid_date_filter_rejected(self):
        response = self.client.get('/api/v1/audit-logs/', {'date_from': 'yesterday'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_lecturer_cannot_read_audit_logs(self):
        self.client.authenticate_user(TestDataFactory.create_user())
        response = self.client.get('/api/v1/audit-logs/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class CreatePortalUserCommandTests(TestCase):

    def test_creates_user(self):
        out = StringIO()
        call_command('create_portal_user', email='staff@campus.test', password='pw-12345', role='staff', stdout=out)
        user = User.objects.get(email='staff@campus.test')
        self.assertEqual(user.role, 'staff')
        self.assertTrue(user.check_password('pw-12345'))
        self.assertIn('Created', out.getvalue())

    def test_updates_existing_user(self):
        TestDataFactory.create_user(email='dosen@campus.test', password='old-pass')
        call_command('create_portal_user', email='dosen@campus.test', password='new-pass', role='staff',
                     stdout=StringIO())
        user = User.objects.get(email='dosen@campus.test')
        self.assertEqual(user.role, 'staff')
        self.assertTrue(user.check_password('new-pass'))
        self.assertEqual(User.objects.count(), 1)
