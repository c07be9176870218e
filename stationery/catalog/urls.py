from django.urls import path
from .views import stationery_item_list_create, stationery_item_detail, stationery_item_update_stock

urlpatterns = [
    path('stationery-items/', stationery_item_list_create, name='stationery-item-list-create'),
    path('stationery-items/<uuid:pk>/', stationery_item_detail, name='stationery-item-detail'),
    path('stationery-items/<uuid:pk>/stock/', stationery_item_update_stock, name='stationery-item-update-stock'),
]
