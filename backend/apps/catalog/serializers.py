from decimal import Decimal

from rest_framework import serializers

from .commands import quantize_price
from .dtos import ProductDTO

# Category ids are small integers
CATEGORY_ID_MIN = -32768
CATEGORY_ID_MAX = 32767

# Largest magnitude a Decimal(10, 2) column holds; anything at or past
# PRICE_CEILING would round up beyond it
PRICE_LIMIT = Decimal("99999999.99")
PRICE_CEILING = Decimal("99999999.995")


class ProductReadSerializer(serializers.Serializer):
    # Matches ProductDTO; wire keys are camelCase
    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    description = serializers.CharField()
    categoryId = serializers.IntegerField(source="category_id")

    def to_representation(self, instance):
        if instance is None:
            return None
        if isinstance(instance, ProductDTO):
            return {
                "id": instance.id,
                "name": instance.name,
                "price": self.fields["price"].to_representation(instance.price),
                "description": instance.description,
                "categoryId": instance.category_id,
            }
        return super().to_representation(instance)


class ProductWriteSerializer(serializers.Serializer):
    # Payload for create and full replacement. 'id' is server-assigned; if a
    # client sends one it is dropped here.
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    # Any precision is accepted and rounded to cents; only the column size is enforced
    price = serializers.DecimalField(max_digits=None, decimal_places=None)
    description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False, default=""
    )
    categoryId = serializers.IntegerField(
        min_value=CATEGORY_ID_MIN, max_value=CATEGORY_ID_MAX
    )

    def validate_price(self, value):
        if abs(value) >= PRICE_CEILING:
            raise serializers.ValidationError(
                f"Ensure the price is between -{PRICE_LIMIT} and {PRICE_LIMIT}."
            )
        return quantize_price(value)


class ProductListQuerySerializer(serializers.Serializer):
    categoryId = serializers.IntegerField(
        required=False, min_value=CATEGORY_ID_MIN, max_value=CATEGORY_ID_MAX
    )
