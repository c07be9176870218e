import uuid

from django.db import models
from stationery.catalog.models import StationeryItem


class RetrievalOrder(models.Model):
    """A request to draw from available stock (retrieval) or to procure new stock (order)"""
    TYPE_RETRIEVAL = 'retrieval'
    TYPE_ORDER = 'order'
    TYPE_CHOICES = [
        (TYPE_RETRIEVAL, 'Retrieval'),
        (TYPE_ORDER, 'Order'),
    ]

    # Assigned by the store on insert; nothing in the application moves it on
    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('approved', 'Approved'),
        ('completed', 'Completed'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, db_index=True)
    user_email = models.CharField(max_length=254, db_index=True)
    item = models.ForeignKey(StationeryItem, on_delete=models.PROTECT, related_name='retrieval_orders')
    item_name = models.CharField(max_length=200)  # snapshot at submission time
    quantity = models.PositiveIntegerField()
    notes = models.TextField(blank=True, null=True)
    date = models.DateTimeField(auto_now_add=True, db_index=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending')

    def __str__(self):
        return f"{self.type} {self.quantity} x {self.item_name} by {self.user_email}"

    class Meta:
        db_table = 'retrieval_orders'
        ordering = ['-date']
