import uuid

from django.db import models
from stationery.catalog.models import StationeryItem


class MissingReport(models.Model):
    """Append-only record of a stock discrepancy; never adjusts the item's counts"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    item = models.ForeignKey(StationeryItem, on_delete=models.PROTECT, related_name='missing_reports')
    item_name = models.CharField(max_length=200)  # snapshot at submission time
    reported_by = models.CharField(max_length=254)
    quantity = models.PositiveIntegerField()
    notes = models.TextField()
    date = models.DateTimeField(auto_now_add=True, db_index=True)

    def __str__(self):
        return f"{self.quantity} x {self.item_name} missing ({self.reported_by})"

    class Meta:
        db_table = 'missing_reports'
        ordering = ['-date']
