"""
Composer World State — Document Records
=========================================
One row per stored document, keyed by (collection_id, identifier).
"""

from __future__ import annotations

from django.db import models


class StateRecord(models.Model):
    collection_id = models.CharField(max_length=255)
    identifier = models.CharField(max_length=255)
    document = models.JSONField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "composer_world_state"
        ordering = ["collection_id", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["collection_id", "identifier"],
                name="uniq_world_state_collection_identifier",
            ),
        ]
        indexes = [
            models.Index(fields=["collection_id"], name="idx_world_state_collection"),
        ]

    def __str__(self) -> str:
        return f"{self.collection_id}#{self.identifier}"
