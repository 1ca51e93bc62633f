import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Master',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('version', models.PositiveIntegerField(default=1, editable=False)),
                ('full_name', models.CharField(max_length=100, verbose_name='full name')),
                ('position', models.CharField(max_length=50)),
                ('rank', models.PositiveSmallIntegerField(help_text='Qualification rank, 1 to 6.', validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(6)])),
                ('hourly_rate', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(10000)], verbose_name='hourly rate')),
            ],
            options={
                'ordering': ['full_name'],
            },
        ),
    ]
