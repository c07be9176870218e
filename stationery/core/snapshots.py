"""
Full-collection reads used after every write.

Views never patch collections in place: after a mutation they call the
fetchers below and return what the store holds now.
"""
from django.conf import settings

from stationery.catalog.models import StationeryItem
from stationery.catalog.serializers import StationeryItemSerializer
from stationery.inventory.models import MissingReport
from stationery.inventory.serializers import MissingReportSerializer
from stationery.orders.models import RetrievalOrder
from stationery.orders.serializers import RetrievalOrderSerializer


def fetch_stationery():
    """All items, sorted by name"""
    items = StationeryItem.objects.order_by('name')
    return StationeryItemSerializer(items, many=True).data


def fetch_orders(user=None):
    """Retrieval/order records, newest first; lecturers only see their own"""
    orders = RetrievalOrder.objects.order_by('-date')
    if user is not None and not user.is_staff_role:
        orders = orders.filter(user_email=user.email)
    return RetrievalOrderSerializer(orders, many=True).data


def fetch_missing_reports(limit=None):
    """Missing-item reports, newest first"""
    reports = MissingReport.objects.order_by('-date')
    if limit:
        reports = reports[:limit]
    return MissingReportSerializer(reports, many=True).data


def fetch_recent_missing_reports():
    return fetch_missing_reports(limit=settings.STATIONERY_CONFIG['RECENT_MISSING_REPORTS'])
