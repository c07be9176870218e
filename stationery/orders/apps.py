from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'stationery.orders'
    label = 'orders'
    verbose_name = 'Retrievals and orders'
