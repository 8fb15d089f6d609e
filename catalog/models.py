from django.db import models

from .services.search_intent import Gender
from .services.taxonomy import VALID_CATEGORIES


class Product(models.Model):
    """
    A catalog item. ``category`` holds a canonical taxonomy name; search
    filters compare it case-insensitively.
    """

    GENDER_CHOICES = [(g.value, g.value) for g in Gender]
    CATEGORY_CHOICES = [(c, c) for c in VALID_CATEGORIES]

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=280, unique=True)
    description = models.TextField(blank=True)
    brand = models.CharField(max_length=150, blank=True)

    # Classification
    category = models.CharField(max_length=100, choices=CATEGORY_CHOICES, db_index=True)
    sub_category = models.CharField(max_length=100, blank=True)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, blank=True, db_index=True)

    # Pricing (minor units)
    price_cents = models.PositiveIntegerField()
    price_before_cents = models.PositiveIntegerField(null=True, blank=True)

    # Media and AI-derived attributes
    images = models.JSONField(default=list, blank=True)
    dominant_color_name = models.CharField(max_length=50, blank=True)
    dominant_color_hex = models.CharField(max_length=7, blank=True)
    ai_tags = models.JSONField(default=dict, blank=True)

    rating = models.DecimalField(max_digits=3, decimal_places=2, null=True, blank=True)
    is_published = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["category", "gender"], name="products_category_gender_idx"),
        ]

    def __str__(self):
        return self.name

    @property
    def price(self):
        return self.price_cents / 100


class ProductVariant(models.Model):
    """A purchasable size/color combination of a product."""

    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="variants")
    size = models.CharField(max_length=20, blank=True)
    color = models.CharField(max_length=50, blank=True)
    stock = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "product_variants"

    def __str__(self):
        return f"{self.product.name} ({self.size or '-'} / {self.color or '-'})"
