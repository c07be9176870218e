from django.urls import path
from .views import retrieval_order_list_create, retrieval_order_detail

urlpatterns = [
    path('retrieval-orders/', retrieval_order_list_create, name='retrieval-order-list-create'),
    path('retrieval-orders/<uuid:pk>/', retrieval_order_detail, name='retrieval-order-detail'),
]
