from django.db import models


class StoredState(models.Model):
    """One serialized JSON document under a well-known key."""
    key = models.CharField(max_length=64, unique=True)
    payload = models.TextField(blank=True, default="[]")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self):
        return self.key
