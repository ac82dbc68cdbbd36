from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator, RegexValidator
from django.db import models
from django.utils.html import strip_tags

# Largest party a single table can seat
MAX_TABLE_CAPACITY = 50


class Restaurant(models.Model):
    """
    A tenant. Each restaurant is addressed by its subdomain
    (``storea.example.com`` -> ``storea``) and owns its tables.
    """
    subdomain_regex = RegexValidator(
        regex=r'^[a-z0-9](?:[a-z0-9\-]*[a-z0-9])?$',
        message="Subdomain can only contain lowercase letters, numbers and inner hyphens."
    )

    subdomain = models.CharField(
        max_length=63,
        unique=True,
        validators=[subdomain_regex],
        help_text="Tenant subdomain (stored lower-case)"
    )
    name = models.CharField(
        max_length=200,
        help_text="Display name (HTML tags will be stripped)"
    )
    email = models.EmailField(
        help_text="Contact email address"
    )
    max_capacity = models.PositiveIntegerField(
        default=30,
        validators=[MinValueValidator(1)],
        help_text="Maximum number of guests the restaurant seats"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["subdomain"]

    def clean(self):
        """Sanitize text fields."""
        super().clean()

        if self.name:
            self.name = strip_tags(self.name).strip()
            if not self.name:
                raise ValidationError({'name': 'Restaurant name cannot be empty after sanitization.'})

    def save(self, *args, **kwargs):
        # Normalized before field validation so "StoreA" is accepted as "storea"
        if self.subdomain:
            self.subdomain = self.subdomain.strip().lower()
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} ({self.subdomain})"


class Table(models.Model):
    """
    A bookable table on a restaurant's floor plan.
    ``number`` is the label guests see and is unique within the restaurant.
    """
    restaurant = models.ForeignKey(
        Restaurant,
        on_delete=models.CASCADE,
        related_name="tables",
    )
    number = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text="Table number shown on the floor plan"
    )
    capacity = models.PositiveIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(MAX_TABLE_CAPACITY)],
        help_text="Maximum seating capacity (1-50 people)"
    )
    photo_url = models.URLField(
        max_length=500,
        blank=True,
        help_text="Optional photo of the table"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["restaurant_id", "number"]
        constraints = [
            models.UniqueConstraint(fields=["restaurant", "number"], name="unique_table_number_per_restaurant"),
        ]
        indexes = [
            models.Index(fields=["restaurant", "capacity"], name="core_table_rest_capacity_idx"),
        ]

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.restaurant.subdomain}#{self.number} ({self.capacity})"
