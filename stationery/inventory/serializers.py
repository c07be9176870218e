from rest_framework import serializers
from stationery.catalog.models import StationeryItem
from stationery.catalog.validators import MAX_STOCK_VALUE
from .models import MissingReport


class MissingReportSerializer(serializers.ModelSerializer):
    itemId = serializers.PrimaryKeyRelatedField(
        source='item', queryset=StationeryItem.objects.all(),
        pk_field=serializers.UUIDField(format='hex_verbose'),
        required=False, allow_null=True,
        error_messages={'does_not_exist': 'Please select a stationery item'},
    )
    itemName = serializers.CharField(source='item_name', read_only=True)
    reportedBy = serializers.CharField(source='reported_by', read_only=True)
    quantity = serializers.IntegerField(required=False, allow_null=True, max_value=MAX_STOCK_VALUE)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    class Meta:
        model = MissingReport
        fields = ['id', 'itemId', 'itemName', 'reportedBy', 'quantity', 'notes', 'date']
        read_only_fields = ['id', 'date']

    def validate(self, attrs):
        if attrs.get('item') is None:
            raise serializers.ValidationError({'itemId': ['Please select a stationery item']})

        quantity = attrs.get('quantity')
        if quantity is None or quantity <= 0:
            raise serializers.ValidationError({'quantity': ['Please enter a valid quantity']})

        notes = (attrs.get('notes') or '').strip()
        if not notes:
            raise serializers.ValidationError({'notes': ['Please provide notes about the missing item']})
        attrs['notes'] = notes
        return attrs

    def create(self, validated_data):
        validated_data['item_name'] = validated_data['item'].name
        return super().create(validated_data)
