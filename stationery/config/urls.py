"""
URL configuration for the stationery inventory portal.

Every app mounts its routes under /api/v1/.
"""
from django.contrib import admin
from django.urls import path, include

admin.site.site_header = "Stationery Inventory Admin Panel"
admin.site.site_title = "Stationery Inventory Admin Portal"
admin.site.index_title = "Campus Stationery Management"

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include('stationery.core.urls')),
    path('api/v1/', include('stationery.catalog.urls')),
    path('api/v1/', include('stationery.orders.urls')),
    path('api/v1/', include('stationery.inventory.urls')),
    path('api/v1/', include('stationery.reports.urls')),
]
