"""
Test suite for retrieval/order requests
Tests: submission validation, stock check for retrievals, visibility per role
"""
from datetime import timedelta
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from stationery.core.test_utils import TestDataFactory, AuthenticatedAPIClient
from stationery.orders.models import RetrievalOrder

URL = '/api/v1/retrieval-orders/'


class RetrievalOrderSubmitTests(TestCase):
    """Test submitting retrievals and orders"""

    def setUp(self):
        self.lecturer = TestDataFactory.create_user(email='dosen@campus.test')
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.lecturer)
        self.item = TestDataFactory.create_item(name='A4 Paper', total_stock=10, available_stock=5, unit='ream')

    def _payload(self, **overrides):
        data = {'type': 'retrieval', 'itemId': str(self.item.id), 'quantity': 2, 'notes': 'Exam printing'}
        data.update(overrides)
        return data

    def test_retrieval_within_available_stock(self):
        response = self.client.post(URL, self._payload(), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        order = RetrievalOrder.objects.get()
        self.assertEqual(order.user_email, 'dosen@campus.test')
        self.assertEqual(order.item_name, 'A4 Paper')
        self.assertEqual(order.status, 'pending')
        self.assertEqual(response.data['order']['status'], 'pending')
        self.assertEqual(len(response.data['retrievalOrders']), 1)
        self.assertEqual(response.data['stationeryItems'][0]['availableStock'], 5)

    def test_retrieval_above_available_stock_rejected(self):
        """Retrieving 6 when 5 are available creates nothing and leaves stock at 5"""
        response = self.client.post(URL, self._payload(quantity=6), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['quantity'], ['Only 5 ream available. Cannot retrieve 6 ream.'])
        self.assertEqual(RetrievalOrder.objects.count(), 0)
        self.item.refresh_from_db()
        self.assertEqual(self.item.available_stock, 5)

    def test_retrieval_of_exactly_available_stock_accepted(self):
        response = self.client.post(URL, self._payload(quantity=5), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_order_may_exceed_available_stock(self):
        response = self.client.post(URL, self._payload(type='order', quantity=50), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(RetrievalOrder.objects.get().type, 'order')

    def test_submission_does_not_change_stock(self):
        self.client.post(URL, self._payload(quantity=3), format='json')
        self.item.refresh_from_db()
        self.assertEqual(self.item.available_stock, 5)

    def test_quantity_above_column_range_rejected(self):
        response = self.client.post(URL, self._payload(type='order', quantity=10 ** 20), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('quantity', response.data)
        self.assertEqual(RetrievalOrder.objects.count(), 0)

    def test_item_required(self):
        response = self.client.post(URL, self._payload(itemId=None), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['itemId'], ['Please select a stationery item'])

    def test_unknown_item_rejected(self):
        response = self.client.post(URL, self._payload(itemId='00000000-0000-0000-0000-000000000000'), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('itemId', response.data)

    def test_quantity_must_be_positive(self):
        for quantity in (0, -2, None):
            response = self.client.post(URL, self._payload(quantity=quantity), format='json')
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data['quantity'], ['Please enter a valid quantity'])

    def test_notes_required(self):
        response = self.client.post(URL, self._payload(notes='   '), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['notes'], ['Please provide notes for this retrieval'])

        response = self.client.post(URL, self._payload(type='order', notes=''), format='json')
        self.assertEqual(response.data['notes'], ['Please provide notes for this order'])

    def test_notes_are_trimmed(self):
        self.client.post(URL, self._payload(notes='  Lab session  '), format='json')
        self.assertEqual(RetrievalOrder.objects.get().notes, 'Lab session')

    def test_status_cannot_be_set_by_client(self):
        self.client.post(URL, self._payload(status='completed'), format='json')
        self.assertEqual(RetrievalOrder.objects.get().status, 'pending')

    def test_item_name_is_a_snapshot(self):
        self.client.post(URL, self._payload(), format='json')
        self.item.name = 'A4 Paper 80gsm'
        self.item.save()
        self.assertEqual(RetrievalOrder.objects.get().item_name, 'A4 Paper')


class RetrievalOrderVisibilityTests(TestCase):
    """Lecturers see their own records, staff see all of them"""

    def setUp(self):
        self.lecturer = TestDataFactory.create_user(email='a@campus.test')
        self.other = TestDataFactory.create_user(email='b@campus.test')
        self.staff = TestDataFactory.create_staff()
        self.item = TestDataFactory.create_item()
        self.own = TestDataFactory.create_order(self.item, self.lecturer.email)
        self.foreign = TestDataFactory.create_order(self.item, self.other.email, type=RetrievalOrder.TYPE_ORDER)
        # Make the ordering deterministic
        RetrievalOrder.objects.filter(pk=self.own.pk).update(date=timezone.now() - timedelta(days=1))
        self.client = AuthenticatedAPIClient()

    def test_lecturer_sees_only_own_records(self):
        self.client.authenticate_user(self.lecturer)
        response = self.client.get(URL)
        self.assertEqual([order['id'] for order in response.data], [str(self.own.id)])

    def test_staff_sees_all_records_newest_first(self):
        self.client.authenticate_user(self.staff)
        response = self.client.get(URL)
        self.assertEqual([order['id'] for order in response.data], [str(self.foreign.id), str(self.own.id)])

    def test_staff_filters_by_type(self):
        self.client.authenticate_user(self.staff)
        response = self.client.get(URL, {'type': 'order'})
        self.assertEqual([order['userEmail'] for order in response.data], ['b@campus.test'])

    def test_invalid_type_filter_rejected(self):
        self.client.authenticate_user(self.staff)
        response = self.client.get(URL, {'type': 'loan'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('type', response.data)

    def test_detail_owner_and_staff_only(self):
        self.client.authenticate_user(self.lecturer)
        self.assertEqual(self.client.get(f'{URL}{self.own.id}/').status_code, status.HTTP_200_OK)
        self.assertEqual(self.client.get(f'{URL}{self.foreign.id}/').status_code, status.HTTP_403_FORBIDDEN)

        self.client.authenticate_user(self.staff)
        self.assertEqual(self.client.get(f'{URL}{self.foreign.id}/').status_code, status.HTTP_200_OK)
