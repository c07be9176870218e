"""
Test utilities and factories for creating test data
"""
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from stationery.catalog.models import StationeryItem
from stationery.inventory.models import MissingReport
from stationery.orders.models import RetrievalOrder
import random
import string

User = get_user_model()


class TestDataFactory:
    """Factory class for creating test data"""

    @staticmethod
    def random_string(length=10):
        """Generate a random string"""
        return ''.join(random.choices(string.ascii_letters + string.digits, k=length))

    @staticmethod
    def create_user(email=None, password='testpass123', role=User.ROLE_LECTURER, is_superuser=False):
        """Create a portal user (lecturer by default)"""
        if not email:
            email = f'user_{TestDataFactory.random_string(6).lower()}@campus.test'
        return User.objects.create_user(
            username=email,
            email=email,
            password=password,
            role=role,
            is_superuser=is_superuser,
        )

    @staticmethod
    def create_staff(email=None, password='testpass123'):
        return TestDataFactory.create_user(email=email, password=password, role=User.ROLE_STAFF)

    @staticmethod
    def create_item(name=None, category=StationeryItem.CATEGORY_OP_STOCK, total_stock=10,
                    available_stock=None, unit='pcs', brand=None, unit_price=None):
        """Create a stationery item; available stock defaults to the total"""
        if not name:
            name = f'Item_{TestDataFactory.random_string(6)}'
        return StationeryItem.objects.create(
            name=name,
            category=category,
            total_stock=total_stock,
            available_stock=total_stock if available_stock is None else available_stock,
            unit=unit,
            brand=brand,
            unit_price=unit_price,
        )

    @staticmethod
    def create_order(item, user_email, type=RetrievalOrder.TYPE_RETRIEVAL, quantity=1, notes='For class'):
        return RetrievalOrder.objects.create(
            type=type,
            user_email=user_email,
            item=item,
            item_name=item.name,
            quantity=quantity,
            notes=notes,
        )

    @staticmethod
    def create_missing_report(item, reported_by, quantity=1, notes='Not found on shelf'):
        return MissingReport.objects.create(
            item=item,
            item_name=item.name,
            reported_by=reported_by,
            quantity=quantity,
            notes=notes,
        )


class AuthenticatedAPIClient(APIClient):
    """API client with authentication helpers"""

    def authenticate_user(self, user):
        """Authenticate a user and set credentials"""
        refresh = RefreshToken.for_user(user)
        self.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        return refresh
