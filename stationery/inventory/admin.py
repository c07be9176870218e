from django.contrib import admin
from .models import MissingReport


@admin.register(MissingReport)
class MissingReportAdmin(admin.ModelAdmin):
    list_display = ['item_name', 'quantity', 'reported_by', 'date']
    list_filter = ['date']
    search_fields = ['item_name', 'reported_by', 'notes']
    ordering = ['-date']
    readonly_fields = ['id', 'item', 'item_name', 'reported_by', 'quantity', 'notes', 'date']
