from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Portal user; the role decides which dashboard and endpoints are available"""
    ROLE_LECTURER = 'lecturer'
    ROLE_STAFF = 'staff'
    ROLE_CHOICES = [
        (ROLE_LECTURER, 'Lecturer'),
        (ROLE_STAFF, 'Academic Support Staff'),
    ]

    # Holds either an e-mail address or a campus ID (NIK)
    email = models.CharField('email or campus ID', max_length=254, unique=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_LECTURER, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    @property
    def is_staff_role(self):
        return self.role == self.ROLE_STAFF or self.is_superuser

    def __str__(self):
        return f"{self.email} ({self.role})"

    class Meta:
        db_table = 'users'


class AuditLog(models.Model):
    """Audit log for stock-changing operations"""
    ACTION_CHOICES = [
        ('create', 'Create'),
        ('update', 'Update'),
        ('delete', 'Delete'),
        ('stock_update', 'Stock Update'),
    ]

    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, related_name='audit_logs')
    action = models.CharField(max_length=50, choices=ACTION_CHOICES)
    model_name = models.CharField(max_length=100)
    object_id = models.CharField(max_length=100)
    object_name = models.CharField(max_length=255, blank=True, null=True, help_text="Human-readable name of the object (e.g., item name)")
    changes = models.JSONField(default=dict, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.action} {self.model_name}:{self.object_id}"

    class Meta:
        db_table = 'audit_logs'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['-created_at'], name='audit_logs_created_3c8f1e_idx'),
            models.Index(fields=['action'], name='audit_logs_action_7d2a4b_idx'),
            models.Index(fields=['model_name'], name='audit_logs_model_n_9e5c0d_idx'),
        ]
