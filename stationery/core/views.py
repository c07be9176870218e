import logging
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer, TokenRefreshSerializer
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ObjectDoesNotExist
from django.db.models import F, Sum
from django.shortcuts import get_object_or_404
from django.utils.dateparse import parse_date

from stationery.catalog.models import StationeryItem
from .models import AuditLog
from .permissions import IsStaffRole
from .serializers import UserSerializer, SessionUserSerializer, AuditLogSerializer
from .snapshots import fetch_orders, fetch_recent_missing_reports, fetch_stationery

logger = logging.getLogger('stationery.core')

User = get_user_model()


class PortalTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Login with email (or campus ID) and password; answers with tokens and the session user"""
    default_error_messages = {
        'no_active_account': 'Invalid credentials',
    }

    def validate(self, attrs):
        data = super().validate(attrs)
        data['user'] = SessionUserSerializer(self.user).data
        logger.info(f"{self.user.email} logged in as {self.user.role}")
        return data

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['email'] = user.email
        token['role'] = user.role
        return token


class PortalTokenObtainPairView(TokenObtainPairView):
    serializer_class = PortalTokenObtainPairSerializer


class PortalTokenRefreshSerializer(TokenRefreshSerializer):
    """Token refresh that rejects tokens of deleted users instead of erroring"""
    def validate(self, attrs):
        try:
            return super().validate(attrs)
        except (InvalidToken, TokenError):
            raise InvalidToken('Token is invalid or expired.')
        except (ObjectDoesNotExist, User.DoesNotExist):
            raise InvalidToken('Token is invalid. User no longer exists.')


class PortalTokenRefreshView(TokenRefreshView):
    serializer_class = PortalTokenRefreshSerializer


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """End the session by blacklisting the supplied refresh token"""
    refresh = request.data.get('refresh')
    if not refresh:
        return Response({'error': 'Refresh token is required'}, status=status.HTTP_400_BAD_REQUEST)
    try:
        RefreshToken(refresh).blacklist()
    except TokenError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    logger.info(f"{request.user.email} logged out")
    return Response(status=status.HTTP_205_RESET_CONTENT)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_me(request):
    """Current user with the dashboard it is entitled to"""
    user_data = UserSerializer(request.user).data
    user_data['is_staff_role'] = request.user.is_staff_role
    user_data['dashboard'] = User.ROLE_STAFF if request.user.is_staff_role else User.ROLE_LECTURER
    return Response(user_data)


def _stock_stats():
    ratio = settings.STATIONERY_CONFIG['LOW_STOCK_RATIO']
    items = StationeryItem.objects.all()
    return {
        'totalItems': items.count(),
        'totalStock': items.aggregate(total=Sum('available_stock'))['total'] or 0,
        'lowStockItems': items.filter(available_stock__lt=F('total_stock') * ratio).count(),
    }


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    """
    Compose the dashboard for the caller's role.

    Lecturers get the item list and their own retrieval/order records.
    Staff additionally get every record, the most recent missing-item
    reports and the stock counters shown on their overview.
    """
    user = request.user
    data = {
        'user': SessionUserSerializer(user).data,
        'stationeryItems': fetch_stationery(),
        'retrievalOrders': fetch_orders(user),
    }
    if user.is_staff_role:
        data['role'] = User.ROLE_STAFF
        data['recentMissingReports'] = fetch_recent_missing_reports()
        data['stats'] = _stock_stats()
    else:
        data['role'] = User.ROLE_LECTURER
    return Response(data)


# AuditLog views (read-only)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
def audit_log_list(request):
    """List audit logs with filtering"""
    queryset = AuditLog.objects.select_related('user')

    action_filter = request.query_params.get('action', None)
    if action_filter:
        queryset = queryset.filter(action=action_filter)

    model_filter = request.query_params.get('model', None)
    if model_filter:
        queryset = queryset.filter(model_name=model_filter)

    for param, lookup in (('date_from', 'created_at__date__gte'), ('date_to', 'created_at__date__lte')):
        raw = request.query_params.get(param)
        if not raw:
            continue
        try:
            value = parse_date(raw)
        except ValueError:
            value = None
        if value is None:
            return Response({'error': f'{param} must be a date (YYYY-MM-DD)'}, status=status.HTTP_400_BAD_REQUEST)
        queryset = queryset.filter(**{lookup: value})

    queryset = queryset.order_by('-created_at')
    serializer = AuditLogSerializer(queryset, many=True)
    return Response(serializer.data)


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
def audit_log_detail(request, pk):
    audit_log = get_object_or_404(AuditLog, pk=pk)
    return Response(AuditLogSerializer(audit_log).data)
