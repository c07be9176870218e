from django.contrib import admin
from .models import StationeryItem


@admin.register(StationeryItem)
class StationeryItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'total_stock', 'available_stock', 'unit', 'brand', 'unit_price', 'updated_at']
    list_filter = ['category', 'created_at']
    search_fields = ['name', 'brand']
    ordering = ['name']
    readonly_fields = ['id', 'created_at', 'updated_at']
