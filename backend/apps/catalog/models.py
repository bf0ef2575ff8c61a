from django.db import models


class Category(models.Model):
    # Small integer ids are assigned by seeding, never through the API
    id = models.SmallAutoField(primary_key=True)
    name = models.CharField(max_length=255)

    class Meta:
        db_table = "categories"
        ordering = ["id"]

    def __str__(self):
        return self.name


class Product(models.Model):
    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    description = models.TextField(blank=True, default="")
    category = models.ForeignKey(
        Category, on_delete=models.PROTECT, related_name="products"
    )

    class Meta:
        db_table = "products"

    def __str__(self):
        return self.name
