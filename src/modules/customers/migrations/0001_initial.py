import re

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        max_length=25,
                        validators=[
                            django.core.validators.RegexValidator(
                                re.compile("^(?=.*[A-Za-z])[A-Za-z ]{2,25}$"),
                                "Please use a name without numbers or specials",
                            )
                        ],
                    ),
                ),
                ("email", models.EmailField(max_length=254, unique=True)),
                (
                    "phone_number",
                    models.CharField(
                        max_length=12,
                        validators=[
                            django.core.validators.RegexValidator(
                                re.compile("^[0-9]{10,12}$"),
                                "Please use a phone number of 10 to 12 digits",
                            )
                        ],
                    ),
                ),
            ],
            options={
                "db_table": "customers",
                "ordering": ["name", "id"],
                "indexes": [
                    models.Index(fields=["name"], name="customers_name_idx"),
                ],
            },
        ),
    ]
