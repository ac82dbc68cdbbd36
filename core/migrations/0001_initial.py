import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Restaurant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("subdomain", models.CharField(
                    help_text="Tenant subdomain (stored lower-case)",
                    max_length=63,
                    unique=True,
                    validators=[django.core.validators.RegexValidator(
                        message="Subdomain can only contain lowercase letters, numbers and inner hyphens.",
                        regex="^[a-z0-9](?:[a-z0-9\\-]*[a-z0-9])?$",
                    )],
                )),
                ("name", models.CharField(help_text="Display name (HTML tags will be stripped)", max_length=200)),
                ("email", models.EmailField(help_text="Contact email address", max_length=254)),
                ("max_capacity", models.PositiveIntegerField(
                    default=30,
                    help_text="Maximum number of guests the restaurant seats",
                    validators=[django.core.validators.MinValueValidator(1)],
                )),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["subdomain"],
            },
        ),
        migrations.CreateModel(
            name="Table",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("number", models.PositiveIntegerField(
                    help_text="Table number shown on the floor plan",
                    validators=[django.core.validators.MinValueValidator(1)],
                )),
                ("capacity", models.PositiveIntegerField(
                    help_text="Maximum seating capacity (1-50 people)",
                    validators=[
                        django.core.validators.MinValueValidator(1),
                        django.core.validators.MaxValueValidator(50),
                    ],
                )),
                ("photo_url", models.URLField(blank=True, help_text="Optional photo of the table", max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("restaurant", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="tables",
                    to="core.restaurant",
                )),
            ],
            options={
                "ordering": ["restaurant_id", "number"],
                "indexes": [models.Index(fields=["restaurant", "capacity"], name="core_table_rest_capacity_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("restaurant", "number"), name="unique_table_number_per_restaurant"),
                ],
            },
        ),
    ]
