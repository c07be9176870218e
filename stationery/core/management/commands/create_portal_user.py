"""
Management command to create or update a lecturer/staff portal account
"""
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

User = get_user_model()


class Command(BaseCommand):
    help = "Creates a portal user, or resets the password and role of an existing one"

    def add_arguments(self, parser):
        parser.add_argument('--email', required=True, help='Email address or campus ID (NIK) used to log in')
        parser.add_argument('--password', required=True)
        parser.add_argument(
            '--role',
            choices=[User.ROLE_LECTURER, User.ROLE_STAFF],
            default=User.ROLE_LECTURER,
            help='Dashboard the account gets (default: lecturer)',
        )

    def handle(self, *args, **options):
        email = options['email'].strip()
        if not email:
            raise CommandError('--email must not be empty')

        user = User.objects.filter(email=email).first()
        if user is None:
            user = User.objects.create_user(
                username=email,
                email=email,
                password=options['password'],
                role=options['role'],
            )
            self.stdout.write(self.style.SUCCESS(f'Created {user.role} account {user.email}'))
            return

        user.set_password(options['password'])
        user.role = options['role']
        user.is_active = True
        user.save(update_fields=['password', 'role', 'is_active', 'updated_at'])
        self.stdout.write(self.style.WARNING(f'Updated existing account {user.email} (role: {user.role})'))
