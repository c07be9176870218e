import logging
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.db import IntegrityError, transaction
from django.shortcuts import get_object_or_404
from django_filters.utils import translate_validation

from stationery.core.snapshots import fetch_orders, fetch_stationery
from .filters import RetrievalOrderFilter
from .models import RetrievalOrder
from .serializers import RetrievalOrderSerializer

logger = logging.getLogger('stationery.orders')


def _visible_orders(user):
    queryset = RetrievalOrder.objects.select_related('item').order_by('-date')
    if not user.is_staff_role:
        queryset = queryset.filter(user_email=user.email)
    return queryset


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def retrieval_order_list_create(request):
    """
    List retrieval/order records or submit a new one.

    Lecturers see only their own records; staff see all of them.
    A new record is stamped with the caller's email and starts as pending.
    """
    if request.method == 'GET':
        filterset = RetrievalOrderFilter(request.query_params, queryset=_visible_orders(request.user))
        if not filterset.is_valid():
            raise translate_validation(filterset.errors)
        serializer = RetrievalOrderSerializer(filterset.qs, many=True)
        return Response(serializer.data)

    serializer = RetrievalOrderSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Rejected retrieval/order from {request.user.email}: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        with transaction.atomic():
            order = serializer.save(user_email=request.user.email)
    except IntegrityError as e:
        logger.error(f"IntegrityError creating retrieval/order: {str(e)}", exc_info=True)
        return Response({'error': 'Database error occurred while submitting the request'}, status=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.error(f"Unexpected error creating retrieval/order: {str(e)}", exc_info=True)
        return Response({'error': f'Failed to submit request: {str(e)}'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(f"{order.type.capitalize()} of {order.quantity} x {order.item_name} submitted by {order.user_email}")

    return Response({
        'order': RetrievalOrderSerializer(order).data,
        'retrievalOrders': fetch_orders(request.user),
        'stationeryItems': fetch_stationery(),
    }, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def retrieval_order_detail(request, pk):
    """Retrieve a single record (owner or staff)"""
    order = get_object_or_404(RetrievalOrder, pk=pk)
    if not request.user.is_staff_role and order.user_email != request.user.email:
        return Response({'error': 'Permission denied'}, status=status.HTTP_403_FORBIDDEN)
    return Response(RetrievalOrderSerializer(order).data)
