from rest_framework import serializers
from .models import User, AuditLog


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'email', 'role', 'first_name', 'last_name', 'is_active', 'created_at']
        read_only_fields = ['created_at']


class SessionUserSerializer(serializers.ModelSerializer):
    """The {email, role} pair the dashboards are keyed on"""

    class Meta:
        model = User
        fields = ['email', 'role']


class AuditLogSerializer(serializers.ModelSerializer):
    user = SessionUserSerializer(read_only=True)

    class Meta:
        model = AuditLog
        fields = ['id', 'user', 'action', 'model_name', 'object_id', 'object_name',
                  'changes', 'ip_address', 'created_at']
