import apps.fleet.photos
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('clients', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Car',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('version', models.PositiveIntegerField(default=1, editable=False)),
                ('brand', models.CharField(max_length=50)),
                ('model', models.CharField(max_length=50)),
                ('manufacture_year', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1900), django.core.validators.MaxValueValidator(2100)], verbose_name='manufacture year')),
                ('license_plate', models.CharField(max_length=20, validators=[django.core.validators.RegexValidator(message='Invalid licence plate format. Example: А123ВС777', regex='^[АВЕКМНОРСТУХ]\\d{3}[АВЕКМНОРСТУХ]{2}\\d{2,3}$')], verbose_name='licence plate')),
                ('vin', models.CharField(max_length=17, validators=[django.core.validators.RegexValidator(message='VIN must be exactly 17 characters: Latin letters except I, O, Q, and digits.', regex='^[A-HJ-NPR-Z0-9]{17}$')], verbose_name='VIN')),
                ('photo', models.FileField(blank=True, upload_to=apps.fleet.photos.car_photo_path, validators=[django.core.validators.FileExtensionValidator(['jpg', 'jpeg', 'png', 'gif']), apps.fleet.photos.validate_photo_size])),
                ('client', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='cars', to='clients.client')),
            ],
            options={
                'ordering': ['brand', 'model', 'license_plate'],
            },
        ),
        migrations.CreateModel(
            name='Tire',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('version', models.PositiveIntegerField(default=1, editable=False)),
                ('tire_type', models.CharField(max_length=50, verbose_name='tyre type')),
                ('seasonality', models.CharField(max_length=50)),
                ('manufacturer', models.CharField(max_length=50)),
                ('tire_model', models.CharField(max_length=50, verbose_name='tyre model')),
                ('size', models.CharField(max_length=20)),
                ('load_index', models.PositiveIntegerField(default=0, verbose_name='load index')),
                ('wear_percentage', models.PositiveSmallIntegerField(default=0, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(100)], verbose_name='wear, %')),
                ('pressure', models.DecimalField(decimal_places=1, max_digits=3, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(10)], verbose_name='pressure, bar')),
                ('car', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tires', to='fleet.car')),
            ],
            options={
                'ordering': ['car', 'manufacturer', 'tire_model'],
            },
        ),
    ]
