from rest_framework import serializers
from stationery.catalog.models import StationeryItem
from stationery.catalog.validators import MAX_STOCK_VALUE
from .models import RetrievalOrder


class RetrievalOrderSerializer(serializers.ModelSerializer):
    """Retrieval/order record; userEmail, itemName, date and status are assigned server-side"""
    userEmail = serializers.CharField(source='user_email', read_only=True)
    itemId = serializers.PrimaryKeyRelatedField(
        source='item', queryset=StationeryItem.objects.all(),
        pk_field=serializers.UUIDField(format='hex_verbose'),
        required=False, allow_null=True,
        error_messages={'does_not_exist': 'Please select a stationery item'},
    )
    itemName = serializers.CharField(source='item_name', read_only=True)
    quantity = serializers.IntegerField(required=False, allow_null=True, max_value=MAX_STOCK_VALUE)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    class Meta:
        model = RetrievalOrder
        fields = ['id', 'type', 'userEmail', 'itemId', 'itemName', 'quantity', 'notes', 'date', 'status']
        read_only_fields = ['id', 'date', 'status']

    def validate(self, attrs):
        item = attrs.get('item')
        if item is None:
            raise serializers.ValidationError({'itemId': ['Please select a stationery item']})

        quantity = attrs.get('quantity')
        if quantity is None or quantity <= 0:
            raise serializers.ValidationError({'quantity': ['Please enter a valid quantity']})

        notes = (attrs.get('notes') or '').strip()
        if not notes:
            raise serializers.ValidationError({'notes': [f"Please provide notes for this {attrs['type']}"]})
        attrs['notes'] = notes

        # Checked against the row as read for this request; the insert below is not locked to it
        if attrs['type'] == RetrievalOrder.TYPE_RETRIEVAL and quantity > item.available_stock:
            raise serializers.ValidationError({
                'quantity': [
                    f"Only {item.available_stock} {item.unit} available. "
                    f"Cannot retrieve {quantity} {item.unit}."
                ]
            })
        return attrs

    def create(self, validated_data):
        validated_data['item_name'] = validated_data['item'].name
        return super().create(validated_data)
