"""
Stock report aggregation.

The JSON summary, the print view and the PDF export all render the dict
built here, so the three outputs always agree on the figures.
"""
from django.utils import timezone

from stationery.catalog.models import StationeryItem


def format_percent(value):
    return '-' if value is None else f'{value:.1f}%'


def format_unit_price(value):
    return '-' if not value else f'{value:,.2f}'


def report_title(generated_at=None):
    """Document title, e.g. Stock-Report-2024-05-31"""
    generated_at = timezone.localtime(generated_at or timezone.now())
    return f"Stock-Report-{generated_at.date().isoformat()}"


def _item_row(item):
    percent = item.get_percent_available()
    return {
        'id': str(item.id),
        'name': item.name,
        'category': item.category,
        'brand': item.brand,
        'unitPrice': item.unit_price,
        'unitPriceDisplay': format_unit_price(item.unit_price),
        'totalStock': item.total_stock,
        'availableStock': item.available_stock,
        'unit': item.unit,
        'percentAvailable': percent,
        'percentDisplay': format_percent(percent),
        'stockLevel': item.get_stock_level(),
    }


def build_stock_report(items=None, generated_at=None):
    """
    Aggregate the item list into the stock report.

    Returns totals (item count and available stock), one entry per category
    with its item count and available stock, and per-item rows grouped by
    category and sorted by name. Items with zero total stock have no
    percentage and are classified red.
    """
    if items is None:
        items = StationeryItem.objects.order_by('name')
    items = sorted(items, key=lambda item: item.name)
    generated_at = timezone.localtime(generated_at or timezone.now())

    rows = [_item_row(item) for item in items]
    categories = []
    sections = []
    for category, label in StationeryItem.CATEGORY_CHOICES:
        category_rows = [row for row in rows if row['category'] == category]
        categories.append({
            'category': label,
            'itemCount': len(category_rows),
            'totalAvailable': sum(row['availableStock'] for row in category_rows),
        })
        sections.append({'category': label, 'items': category_rows})

    by_category = {entry['category']: entry for entry in categories}
    return {
        'title': report_title(generated_at),
        'generatedAt': generated_at.isoformat(),
        'generatedDate': generated_at.strftime('%d/%m/%Y'),
        'generatedTime': generated_at.strftime('%H:%M:%S'),
        'summary': {
            'totalItems': len(rows),
            'totalAvailableStock': sum(row['availableStock'] for row in rows),
            'opStockItems': by_category[StationeryItem.CATEGORY_OP_STOCK]['itemCount'],
            'opNonStockItems': by_category[StationeryItem.CATEGORY_OP_NON_STOCK]['itemCount'],
        },
        'categories': categories,
        'items': rows,
        'sections': sections,
    }
