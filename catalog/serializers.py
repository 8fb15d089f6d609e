"""
Catalog Serializers

Product output and search parameter validation.
"""

from rest_framework import serializers

from .models import Product, ProductVariant
from .repositories import ProductRepository


class ProductVariantSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductVariant
        fields = ["size", "color", "stock"]


class ProductSerializer(serializers.ModelSerializer):
    """Listing representation of a product."""
    variants = ProductVariantSerializer(many=True, read_only=True)
    price = serializers.FloatField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "slug",
            "brand",
            "category",
            "sub_category",
            "gender",
            "price",
            "price_cents",
            "price_before_cents",
            "images",
            "dominant_color_name",
            "dominant_color_hex",
            "rating",
            "variants",
        ]


class SearchParamsSerializer(serializers.Serializer):
    """Optional filters accepted alongside ``q`` on the search endpoint."""
    sort = serializers.ChoiceField(
        choices=list(ProductRepository.SORT_OPTIONS),
        default=ProductRepository.DEFAULT_SORT,
    )
    min_price = serializers.FloatField(required=False, min_value=0)
    max_price = serializers.FloatField(required=False, min_value=0)

    def validate(self, attrs):
        low, high = attrs.get("min_price"), attrs.get("max_price")
        if low is not None and high is not None and low > high:
            raise serializers.ValidationError("min_price must not exceed max_price")
        return attrs
