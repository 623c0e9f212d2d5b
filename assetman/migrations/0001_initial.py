"""
Initial migration for Assetman models.
"""

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Assetman models: Warehouse, Location, Movement, Reservation, StockLocation, RoutingAssignment."""

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Warehouse',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(help_text='Unique identifier (ex: FR-PAR-01)', max_length=32, unique=True, verbose_name='Code')),
                ('name', models.CharField(max_length=100, verbose_name='Name')),
                ('country', models.CharField(help_text='ISO 3166-1 alpha-2, upper case', max_length=2, verbose_name='Country')),
                ('active', models.BooleanField(db_index=True, default=True, help_text='Inactive warehouses are never considered for routing.', verbose_name='Active')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Warehouse',
                'verbose_name_plural': 'Warehouses',
                'ordering': ['code'],
            },
        ),
        migrations.CreateModel(
            name='Location',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(help_text='Unique within the warehouse (ex: A-01-03)', max_length=50, verbose_name='Code')),
                ('kind', models.CharField(choices=[('RECEIVING', 'Receiving'), ('STORAGE', 'Storage'), ('ASSEMBLY', 'Assembly'), ('SHIPPING', 'Shipping')], default='STORAGE', max_length=20, verbose_name='Type')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('warehouse', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='locations', to='assetman.warehouse', verbose_name='Warehouse')),
            ],
            options={
                'verbose_name': 'Location',
                'verbose_name_plural': 'Locations',
                'ordering': ['warehouse__code', 'code'],
                'constraints': [
                    models.UniqueConstraint(fields=('warehouse', 'code'), name='assetman_unique_location_code'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Movement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('asset_id', models.CharField(db_index=True, max_length=64, verbose_name='Asset')),
                ('reason', models.CharField(choices=[('INTAKE', 'Intake'), ('MOVE', 'Move'), ('RESERVE', 'Reservation'), ('RELEASE', 'Release'), ('SHIP', 'Shipment'), ('RETURN', 'Return')], max_length=20, verbose_name='Reason')),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Date/Time')),
                ('from_location', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='assetman.location', verbose_name='From')),
                ('to_location', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='+', to='assetman.location', verbose_name='To')),
            ],
            options={
                'verbose_name': 'Movement',
                'verbose_name_plural': 'Movements',
                'ordering': ['pk'],
                'indexes': [
                    models.Index(fields=['asset_id', 'id'], name='assetman_movement_asset_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Reservation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('asset_id', models.CharField(max_length=64, unique=True, verbose_name='Asset')),
                ('order_ref', models.CharField(db_index=True, max_length=64, verbose_name='Order')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Reservation',
                'verbose_name_plural': 'Reservations',
                'ordering': ['created_at', 'pk'],
            },
        ),
        migrations.CreateModel(
            name='StockLocation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('asset_id', models.CharField(db_index=True, max_length=64, verbose_name='Asset')),
                ('status', models.CharField(choices=[('AVAILABLE', 'Available'), ('RESERVED', 'Reserved')], db_index=True, default='AVAILABLE', max_length=20, verbose_name='Status')),
                ('order_id', models.CharField(blank=True, db_index=True, max_length=64, null=True, verbose_name='Order')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('warehouse', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='stock', to='assetman.warehouse', verbose_name='Warehouse')),
            ],
            options={
                'verbose_name': 'Stock entry',
                'verbose_name_plural': 'Stock entries',
                'ordering': ['warehouse__code', 'asset_id'],
                'constraints': [
                    models.UniqueConstraint(fields=('asset_id', 'warehouse'), name='assetman_unique_stock_per_warehouse'),
                ],
                'indexes': [
                    models.Index(fields=['warehouse', 'status'], name='assetman_stock_wh_status_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='RoutingAssignment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('order_id', models.CharField(max_length=64, unique=True, verbose_name='Order')),
                ('assigned_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Assigned at')),
                ('warehouse', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='assignments', to='assetman.warehouse', verbose_name='Warehouse')),
            ],
            options={
                'verbose_name': 'Routing assignment',
                'verbose_name_plural': 'Routing assignments',
                'ordering': ['-assigned_at'],
            },
        ),
    ]
