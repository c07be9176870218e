from django.contrib import admin
from .models import RetrievalOrder


@admin.register(RetrievalOrder)
class RetrievalOrderAdmin(admin.ModelAdmin):
    list_display = ['item_name', 'type', 'quantity', 'user_email', 'status', 'date']
    list_filter = ['type', 'status', 'date']
    search_fields = ['item_name', 'user_email', 'notes']
    ordering = ['-date']
    readonly_fields = ['id', 'item', 'item_name', 'user_email', 'date']
