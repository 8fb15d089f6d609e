import django.db.models.deletion
from django.db import migrations, models

from catalog.services.taxonomy import VALID_CATEGORIES


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("slug", models.SlugField(max_length=280, unique=True)),
                ("description", models.TextField(blank=True)),
                ("brand", models.CharField(blank=True, max_length=150)),
                ("category", models.CharField(choices=[(c, c) for c in VALID_CATEGORIES], db_index=True, max_length=100)),
                ("sub_category", models.CharField(blank=True, max_length=100)),
                ("gender", models.CharField(blank=True, choices=[("Men", "Men"), ("Women", "Women"), ("Kids", "Kids")], db_index=True, max_length=10)),
                ("price_cents", models.PositiveIntegerField()),
                ("price_before_cents", models.PositiveIntegerField(blank=True, null=True)),
                ("images", models.JSONField(blank=True, default=list)),
                ("dominant_color_name", models.CharField(blank=True, max_length=50)),
                ("dominant_color_hex", models.CharField(blank=True, max_length=7)),
                ("ai_tags", models.JSONField(blank=True, default=dict)),
                ("rating", models.DecimalField(blank=True, decimal_places=2, max_digits=3, null=True)),
                ("is_published", models.BooleanField(db_index=True, default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "products",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["category", "gender"], name="products_category_gender_idx")],
            },
        ),
        migrations.CreateModel(
            name="ProductVariant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("size", models.CharField(blank=True, max_length=20)),
                ("color", models.CharField(blank=True, max_length=50)),
                ("stock", models.PositiveIntegerField(default=0)),
                ("product", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="variants", to="catalog.product")),
            ],
            options={
                "db_table": "product_variants",
            },
        ),
    ]
