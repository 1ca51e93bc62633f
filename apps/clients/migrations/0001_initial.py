import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Client',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('version', models.PositiveIntegerField(default=1, editable=False)),
                ('full_name', models.CharField(max_length=100, verbose_name='full name')),
                ('phone', models.CharField(max_length=20, validators=[django.core.validators.RegexValidator(message='Invalid phone number format.', regex='^\\+?[0-9\\s\\-().]{5,20}$')])),
            ],
            options={
                'ordering': ['full_name'],
            },
        ),
    ]
