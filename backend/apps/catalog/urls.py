from django.urls import path
from .views import ProductListView, ProductCreateView, ProductDetailView

urlpatterns = [
    path("products", ProductListView.as_view(), name="api-products-list"),
    path("products/create", ProductCreateView.as_view(), name="api-products-create"),
    path(
        "products/<rowid:product_id>",
        ProductDetailView.as_view(),
        name="api-products-detail",
    ),
]
