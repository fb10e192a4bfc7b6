# Generated manually for the expense tracker

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('workspaces', '0001_initial'),
        ('catalog', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Ticket',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField()),
                ('total_amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.00'))])),
                ('payment_method', models.CharField(choices=[('Debito', 'Débito'), ('Credito', 'Crédito')], default='Debito', max_length=20)),
                ('installments', models.PositiveSmallIntegerField(default=1, validators=[MinValueValidator(1)])),
                ('current_installment', models.PositiveSmallIntegerField(default=1, validators=[MinValueValidator(1)])),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('store', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='tickets', to='catalog.store')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='tickets', to=settings.AUTH_USER_MODEL)),
                ('workspace', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tickets', to='workspaces.workspace')),
            ],
            options={
                'db_table': 'tickets',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['workspace', 'date'], name='tickets_workspace_date_idx'),
                    models.Index(fields=['store', 'date'], name='tickets_store_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='TicketItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('position', models.PositiveIntegerField(default=0)),
                ('quantity', models.PositiveIntegerField(validators=[MinValueValidator(1)])),
                ('unit_price', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.00'))])),
                ('total_price', models.DecimalField(decimal_places=2, editable=False, max_digits=14)),
                ('description', models.CharField(blank=True, max_length=255)),
                ('temporary_item', models.BooleanField(default=False)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='ticket_items', to='catalog.product')),
                ('ticket', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='tickets.ticket')),
            ],
            options={
                'db_table': 'ticket_items',
                'ordering': ['position'],
            },
        ),
    ]
