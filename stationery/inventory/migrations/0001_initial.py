# Generated manually for the missing-item report model

import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='MissingReport',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('item_name', models.CharField(max_length=200)),
                ('reported_by', models.CharField(max_length=254)),
                ('quantity', models.PositiveIntegerField()),
                ('notes', models.TextField()),
                ('date', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('item', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='missing_reports', to='catalog.stationeryitem')),
            ],
            options={
                'db_table': 'missing_reports',
                'ordering': ['-date'],
            },
        ),
    ]
