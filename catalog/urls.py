"""
Catalog URLs

URL routing for the catalog app.
"""

from django.urls import path
from .views import (
    ProductSearchView, CategoryListView, CategorySuggestView, ProductTagView, HealthView,
)

urlpatterns = [
    path('products/search/', ProductSearchView.as_view(), name='product-search'),
    path('products/categories/', CategoryListView.as_view(), name='product-categories'),
    path('products/ai/suggest-category/', CategorySuggestView.as_view(), name='suggest-category'),
    path('products/ai/tags/', ProductTagView.as_view(), name='product-tags'),
    path('health/', HealthView.as_view(), name='health'),
]
