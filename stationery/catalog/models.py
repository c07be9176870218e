import uuid

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import F, Q


class StationeryItem(models.Model):
    """Stationery master with total and currently available stock"""
    CATEGORY_OP_STOCK = 'OP Stock'
    CATEGORY_OP_NON_STOCK = 'OP Non-Stock'
    CATEGORY_CHOICES = [
        (CATEGORY_OP_STOCK, 'OP Stock'),
        (CATEGORY_OP_NON_STOCK, 'OP Non-Stock'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, default=CATEGORY_OP_STOCK, db_index=True)
    total_stock = models.IntegerField(default=0)
    available_stock = models.IntegerField(default=0)
    unit = models.CharField(max_length=50)
    # Brand and unit price are tracked for OP Non-Stock items
    brand = models.CharField(max_length=200, blank=True, null=True)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def _percent(self):
        if not self.total_stock:
            return None
        return self.available_stock / self.total_stock * 100

    def get_percent_available(self):
        """Share of total stock still available (one decimal), or None when total stock is zero"""
        percent = self._percent()
        return None if percent is None else round(percent, 1)

    def get_stock_level(self):
        """red below 20%, orange below 50%, green otherwise"""
        percent = self._percent()
        if percent is None or percent < 20:
            return 'red'
        if percent < 50:
            return 'orange'
        return 'green'

    def clean(self):
        if self.total_stock is not None and self.total_stock < 0:
            raise ValidationError({'total_stock': 'Total stock cannot be negative'})
        if self.available_stock is not None and self.available_stock < 0:
            raise ValidationError({'available_stock': 'Available stock cannot be negative'})
        if self.available_stock > self.total_stock:
            raise ValidationError({'available_stock': 'Available stock cannot exceed total stock'})

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} ({self.category})"

    class Meta:
        db_table = 'stationery_items'
        ordering = ['name']
        constraints = [
            models.CheckConstraint(condition=Q(total_stock__gte=0), name='stationery_total_stock_non_negative'),
            models.CheckConstraint(condition=Q(available_stock__gte=0), name='stationery_available_stock_non_negative'),
            models.CheckConstraint(condition=Q(available_stock__lte=F('total_stock')), name='stationery_available_within_total'),
        ]
