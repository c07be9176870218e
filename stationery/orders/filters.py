import django_filters
from .models import RetrievalOrder


class RetrievalOrderFilter(django_filters.FilterSet):
    type = django_filters.ChoiceFilter(choices=RetrievalOrder.TYPE_CHOICES)
    status = django_filters.ChoiceFilter(choices=RetrievalOrder.STATUS_CHOICES)

    class Meta:
        model = RetrievalOrder
        fields = ['type', 'status']
