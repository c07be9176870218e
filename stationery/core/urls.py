from django.urls import path
from .views import (
    PortalTokenObtainPairView, PortalTokenRefreshView, logout, user_me,
    dashboard,
    audit_log_list, audit_log_detail,
)

urlpatterns = [
    # Auth endpoints
    path('auth/login/', PortalTokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('auth/refresh/', PortalTokenRefreshView.as_view(), name='token_refresh'),
    path('auth/logout/', logout, name='logout'),
    path('auth/me/', user_me, name='user-me'),

    path('dashboard/', dashboard, name='dashboard'),

    # AuditLog endpoints
    path('audit-logs/', audit_log_list, name='audit-log-list'),
    path('audit-logs/<int:pk>/', audit_log_detail, name='audit-log-detail'),
]
