from rest_framework import serializers
from .models import StationeryItem
from .validators import MAX_STOCK_VALUE, validate_stock_levels, validate_available_stock


class StationeryItemSerializer(serializers.ModelSerializer):
    """Maps the application's camelCase fields onto the stationery_items columns"""
    name = serializers.CharField(max_length=200, allow_blank=True, default='')
    unit = serializers.CharField(max_length=50, allow_blank=True, default='')
    totalStock = serializers.IntegerField(source='total_stock', max_value=MAX_STOCK_VALUE)
    availableStock = serializers.IntegerField(source='available_stock', max_value=MAX_STOCK_VALUE)
    unitPrice = serializers.DecimalField(
        source='unit_price', max_digits=12, decimal_places=2, min_value=0,
        required=False, allow_null=True, coerce_to_string=False
    )
    brand = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    percentAvailable = serializers.SerializerMethodField()
    stockLevel = serializers.SerializerMethodField()

    class Meta:
        model = StationeryItem
        fields = ['id', 'name', 'category', 'totalStock', 'availableStock', 'unit',
                  'brand', 'unitPrice', 'percentAvailable', 'stockLevel']
        read_only_fields = ['id']

    def get_percentAvailable(self, obj):
        return obj.get_percent_available()

    def get_stockLevel(self, obj):
        return obj.get_stock_level()

    def validate(self, attrs):
        instance = self.instance
        name = attrs.get('name', instance.name if instance else '')
        unit = attrs.get('unit', instance.unit if instance else '')
        total_stock = attrs.get('total_stock', instance.total_stock if instance else None)
        available_stock = attrs.get('available_stock', instance.available_stock if instance else None)
        validate_stock_levels(name, unit, total_stock, available_stock)
        attrs['name'] = name.strip()
        attrs['unit'] = unit.strip()
        if attrs.get('brand') == '':
            attrs['brand'] = None
        return attrs


class StockUpdateSerializer(serializers.Serializer):
    """Inline edit of an item's available stock"""
    availableStock = serializers.JSONField()

    def validate(self, attrs):
        attrs['available_stock'] = validate_available_stock(self.context['item'], attrs.pop('availableStock'))
        return attrs
