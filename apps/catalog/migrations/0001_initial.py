import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Service',
            fields=[
                ('version', models.PositiveIntegerField(default=1, editable=False)),
                ('code', models.AutoField(primary_key=True, serialize=False, verbose_name='service code')),
                ('name', models.CharField(max_length=100, verbose_name='service name')),
                ('cost', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(1000000)], verbose_name='service cost')),
            ],
            options={
                'ordering': ['name'],
            },
        ),
    ]
