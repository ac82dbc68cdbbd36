import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Reservation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField()),
                ("time", models.TimeField()),
                ("party_size", models.PositiveIntegerField(
                    help_text="Number of guests",
                    validators=[django.core.validators.MinValueValidator(1)],
                )),
                ("guest_name", models.CharField(help_text="Guest name (HTML tags will be stripped)", max_length=120)),
                ("guest_email", models.EmailField(help_text="Guest email address", max_length=254)),
                ("status", models.CharField(
                    choices=[("confirmed", "Confirmed"), ("cancelled", "Cancelled")],
                    default="confirmed",
                    help_text="Current reservation status",
                    max_length=12,
                )),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("cancelled_at", models.DateTimeField(blank=True, help_text="When reservation was cancelled", null=True)),
                ("restaurant", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="reservations",
                    to="core.restaurant",
                )),
                ("table", models.ForeignKey(
                    help_text="Table for this reservation",
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name="reservations",
                    to="core.table",
                )),
            ],
            options={
                "ordering": ["-date", "-time", "-id"],
                "indexes": [models.Index(fields=["restaurant", "date", "time"], name="reservation_slot_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("table", "date", "time"), name="unique_table_slot"),
                ],
            },
        ),
    ]
