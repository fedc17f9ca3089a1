import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Listing",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("APARTMENT", "Apartment"),
                            ("HOUSE", "House"),
                            ("VILLA", "Villa"),
                            ("STUDIO", "Studio"),
                            ("ROOM", "Room"),
                            ("OTHER", "Other"),
                        ],
                        default="APARTMENT",
                        max_length=20,
                    ),
                ),
                (
                    "price_per_night",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                ("city", models.CharField(max_length=120)),
                ("address", models.CharField(max_length=255)),
                ("postal_code", models.CharField(blank=True, max_length=20)),
                ("country", models.CharField(blank=True, max_length=120)),
                (
                    "capacity",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        help_text="Maximum number of guests; empty means unlimited.",
                        null=True,
                    ),
                ),
                ("bedrooms", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("bathrooms", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("house_rules", models.TextField(blank=True)),
                ("is_active", models.BooleanField(default=True)),
                (
                    "availability_revision",
                    models.PositiveIntegerField(
                        default=0,
                        editable=False,
                        help_text="Bumped by every booking write; the update doubles as the per-listing lock.",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="listings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Listing",
                "verbose_name_plural": "Listings",
                "ordering": ["-id"],
                "indexes": [
                    models.Index(fields=["city"], name="listing_city_idx"),
                    models.Index(fields=["is_active", "category"], name="listing_active_category_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(price_per_night__gte=0),
                        name="listing_price_non_negative",
                    ),
                ],
            },
        ),
    ]
