"""
Shared fixtures for catalog tests.
"""

import io
import itertools

import pytest
from PIL import Image

_slugs = itertools.count(1)


@pytest.fixture
def png_bytes():
    """A small RGBA PNG, as an admin upload would send it."""
    buf = io.BytesIO()
    Image.new("RGBA", (64, 32), (200, 30, 30, 255)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def make_product(db):
    """Factory for Product rows with optional variant colors."""
    from catalog.models import Product, ProductVariant

    def _make(name="Item", category="Tops", gender="Women", color="", variant_colors=(),
              price_cents=1999, is_published=True, **extra):
        product = Product.objects.create(
            name=name,
            slug=f"{name.lower().replace(' ', '-')}-{next(_slugs)}",
            category=category,
            gender=gender,
            dominant_color_name=color,
            price_cents=price_cents,
            is_published=is_published,
            **extra,
        )
        for variant_color in variant_colors:
            ProductVariant.objects.create(product=product, size="M", color=variant_color, stock=5)
        return product

    return _make
