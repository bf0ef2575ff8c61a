from django.db import models


class User(models.Model):
    # Store customer record; not wired into django.contrib.auth
    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255)
    email = models.CharField(max_length=255)
    # Django password hash, never the raw value
    password = models.CharField(max_length=255)

    class Meta:
        db_table = "users"

    def __str__(self):
        return self.email
