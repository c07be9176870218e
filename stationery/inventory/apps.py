from django.apps import AppConfig


class InventoryConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'stationery.inventory'
    label = 'inventory'
    verbose_name = 'Missing item reports'
