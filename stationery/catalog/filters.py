import django_filters
from django.db.models import Q
from .models import StationeryItem


class StationeryItemFilter(django_filters.FilterSet):
    """Filter stationery items by category, or by a case-insensitive name/brand search"""
    category = django_filters.ChoiceFilter(choices=StationeryItem.CATEGORY_CHOICES)
    search = django_filters.CharFilter(method='filter_search')

    class Meta:
        model = StationeryItem
        fields = ['category']

    def filter_search(self, queryset, name, value):
        value = (value or '').strip()
        if not value:
            return queryset
        return queryset.filter(Q(name__icontains=value) | Q(brand__icontains=value))
