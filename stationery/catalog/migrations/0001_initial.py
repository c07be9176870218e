# Generated manually for the stationery item model

import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='StationeryItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=200)),
                ('category', models.CharField(choices=[('OP Stock', 'OP Stock'), ('OP Non-Stock', 'OP Non-Stock')], db_index=True, default='OP Stock', max_length=20)),
                ('total_stock', models.IntegerField(default=0)),
                ('available_stock', models.IntegerField(default=0)),
                ('unit', models.CharField(max_length=50)),
                ('brand', models.CharField(blank=True, max_length=200, null=True)),
                ('unit_price', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'stationery_items',
                'ordering': ['name'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('total_stock__gte', 0)), name='stationery_total_stock_non_negative'),
                    models.CheckConstraint(condition=models.Q(('available_stock__gte', 0)), name='stationery_available_stock_non_negative'),
                    models.CheckConstraint(condition=models.Q(('available_stock__lte', models.F('total_stock'))), name='stationery_available_within_total'),
                ],
            },
        ),
    ]
