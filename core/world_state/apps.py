"""
Composer World State — App Configuration
==========================================
Django-backed world state for the embedded runtime.

This app:
- Persists registry, identity and historian documents as JSON
- Commits one transaction's writes atomically

This app does NOT:
- Interpret documents (the serializer does)
- Enforce ACL (registries do)
"""

from django.apps import AppConfig


class WorldStateConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core.world_state"
    label = "world_state"
    verbose_name = "Composer World State"
