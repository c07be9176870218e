"""
Stock validation shared by the add-item and inline stock-edit paths.

Both functions raise before anything is written, so a rejected submission
never reaches the database.
"""
from rest_framework import serializers

# Largest value a 32-bit integer column accepts
MAX_STOCK_VALUE = 2147483647


def validate_stock_levels(name, unit, total_stock, available_stock):
    """
    Validate an add-item submission as a whole.

    Rejects an empty name or unit, negative stock figures, and an available
    stock above the total. available_stock == total_stock is allowed.
    """
    if not (name or '').strip() or not (unit or '').strip():
        raise serializers.ValidationError({'non_field_errors': ['Item name and unit are required']})

    errors = {}
    if total_stock is None or total_stock < 0:
        errors['totalStock'] = ['Total stock cannot be negative']
    if available_stock is None or available_stock < 0:
        errors['availableStock'] = ['Available stock cannot be negative']
    if errors:
        raise serializers.ValidationError(errors)

    if available_stock > total_stock:
        raise serializers.ValidationError({'availableStock': ['Available stock cannot exceed total stock']})


def parse_stock_value(raw_value):
    """Coerce an edited stock cell to a non-negative integer"""
    try:
        value = float(str(raw_value).strip())
    except (TypeError, ValueError):
        raise serializers.ValidationError({'availableStock': ['Please enter a valid positive number']})
    if value != value or value < 0 or not value.is_integer():
        raise serializers.ValidationError({'availableStock': ['Please enter a valid positive number']})
    return int(value)


def validate_available_stock(item, new_stock):
    """Validate an inline edit of available stock against the item's total"""
    new_stock = parse_stock_value(new_stock)
    if new_stock > item.total_stock:
        raise serializers.ValidationError(
            {'availableStock': [f'Available stock cannot exceed total stock ({item.total_stock})']}
        )
    return new_stock
