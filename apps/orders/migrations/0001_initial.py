import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
        ('fleet', '0001_initial'),
        ('staff', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('version', models.PositiveIntegerField(default=1, editable=False)),
                ('order_number', models.AutoField(primary_key=True, serialize=False, verbose_name='order number')),
                ('order_date', models.DateTimeField(default=django.utils.timezone.now, verbose_name='order date')),
                ('payment_date', models.DateTimeField(blank=True, null=True, verbose_name='payment date')),
                ('car', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='orders', to='fleet.car')),
                ('master', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='orders', to='staff.master')),
            ],
            options={
                'ordering': ['-order_date', '-order_number'],
                'indexes': [
                    models.Index(fields=['order_date'], name='orders_order_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CompletedWork',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('version', models.PositiveIntegerField(default=1, editable=False)),
                ('wheel_count', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(4)], verbose_name='wheel count')),
                ('completion_time_min', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(480)], verbose_name='completion time, min')),
                ('work_total', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(1000000)], verbose_name='work total')),
                ('master', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='completed_works', to='staff.master')),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='completed_works', to='orders.order')),
                ('service', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='completed_works', to='catalog.service')),
            ],
            options={
                'ordering': ['-order__order_date', 'id'],
            },
        ),
    ]
