import logging
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.db import IntegrityError, transaction
from django.db.models.deletion import ProtectedError
from django.shortcuts import get_object_or_404
from django_filters.utils import translate_validation

from stationery.core.permissions import IsStaffRole
from stationery.core.snapshots import fetch_stationery
from stationery.core.utils import create_audit_log
from .filters import StationeryItemFilter
from .models import StationeryItem
from .serializers import StationeryItemSerializer, StockUpdateSerializer

logger = logging.getLogger('stationery.catalog')


def _store_error(action, exc):
    logger.error(f"Unexpected error while trying to {action}: {str(exc)}", exc_info=True)
    return Response({'error': f'Failed to {action}: {str(exc)}'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def stationery_item_list_create(request):
    """List stationery items sorted by name, or add a new item (staff only)"""
    if request.method == 'GET':
        filterset = StationeryItemFilter(request.query_params, queryset=StationeryItem.objects.order_by('name'))
        if not filterset.is_valid():
            raise translate_validation(filterset.errors)
        serializer = StationeryItemSerializer(filterset.qs, many=True)
        return Response(serializer.data)

    if not IsStaffRole().has_permission(request, None):
        return Response({'error': IsStaffRole.message}, status=status.HTTP_403_FORBIDDEN)

    serializer = StationeryItemSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Rejected new item from {request.user.email}: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        with transaction.atomic():
            item = serializer.save()
    except IntegrityError as e:
        logger.error(f"IntegrityError creating stationery item: {str(e)}", exc_info=True)
        return Response({'error': 'Database error occurred while adding the item'}, status=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        return _store_error('add item', e)

    create_audit_log(request=request, action='create', model_name='StationeryItem',
                     object_id=item.id, object_name=item.name,
                     changes={'total_stock': item.total_stock, 'available_stock': item.available_stock})
    logger.info(f"Item '{item.name}' ({item.category}) added by {request.user.email}")

    return Response({
        'item': StationeryItemSerializer(item).data,
        'stationeryItems': fetch_stationery(),
    }, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def stationery_item_detail(request, pk):
    """Retrieve, update (staff) or delete (staff) a stationery item"""
    item = get_object_or_404(StationeryItem, pk=pk)

    if request.method == 'GET':
        return Response(StationeryItemSerializer(item).data)

    if not IsStaffRole().has_permission(request, None):
        return Response({'error': IsStaffRole.message}, status=status.HTTP_403_FORBIDDEN)

    if request.method == 'PATCH':
        before = {'total_stock': item.total_stock, 'available_stock': item.available_stock}
        serializer = StationeryItemSerializer(item, data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        try:
            with transaction.atomic():
                item = serializer.save()
        except IntegrityError as e:
            logger.error(f"IntegrityError updating stationery item {pk}: {str(e)}", exc_info=True)
            return Response({'error': 'Database error occurred while updating the item'}, status=status.HTTP_400_BAD_REQUEST)
        except Exception as e:
            return _store_error('update item', e)

        create_audit_log(request=request, action='update', model_name='StationeryItem',
                         object_id=item.id, object_name=item.name,
                         changes={'before': before,
                                  'after': {'total_stock': item.total_stock, 'available_stock': item.available_stock}})
        return Response({
            'item': StationeryItemSerializer(item).data,
            'stationeryItems': fetch_stationery(),
        })

    # DELETE
    item_name = item.name
    try:
        with transaction.atomic():
            item.delete()
    except ProtectedError:
        logger.warning(f"Refused to delete '{item_name}': referenced by orders or reports")
        return Response(
            {'error': 'Cannot delete this item because it is already used in orders or reports.'},
            status=status.HTTP_400_BAD_REQUEST
        )
    except IntegrityError as e:
        logger.error(f"IntegrityError deleting stationery item {pk}: {str(e)}", exc_info=True)
        return Response({'error': f'Failed to delete item: {str(e)}'}, status=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        return _store_error('delete item', e)

    create_audit_log(request=request, action='delete', model_name='StationeryItem',
                     object_id=pk, object_name=item_name)
    logger.info(f"Item '{item_name}' deleted by {request.user.email}")
    return Response({'stationeryItems': fetch_stationery()})


@api_view(['PATCH'])
@permission_classes([IsAuthenticated, IsStaffRole])
def stationery_item_update_stock(request, pk):
    """Inline edit of available stock; rejected edits leave the item untouched"""
    item = get_object_or_404(StationeryItem, pk=pk)
    serializer = StockUpdateSerializer(data=request.data, context={'item': item})
    if not serializer.is_valid():
        logger.warning(f"Rejected stock edit for '{item.name}' by {request.user.email}: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    previous = item.available_stock
    item.available_stock = serializer.validated_data['available_stock']
    try:
        with transaction.atomic():
            item.save(update_fields=['available_stock', 'updated_at'])
    except IntegrityError as e:
        logger.error(f"IntegrityError updating stock for {pk}: {str(e)}", exc_info=True)
        return Response({'error': 'Database error occurred while updating stock'}, status=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        return _store_error('update stock', e)

    create_audit_log(request=request, action='stock_update', model_name='StationeryItem',
                     object_id=item.id, object_name=item.name,
                     changes={'available_stock': {'from': previous, 'to': item.available_stock}})
    logger.info(f"{item.name} stock updated to {item.available_stock} {item.unit} by {request.user.email}")

    return Response({
        'item': StationeryItemSerializer(item).data,
        'stationeryItems': fetch_stationery(),
    })
