"""
Composer Core Config — Runtime Settings
==========================================
Embedded runtime settings come from the Django settings module
(``config.settings``) under the ``BUSINESS_NETWORKS`` key.

When Django is not configured (plain unit tests, scripts) the same
defaults apply, so a runtime can always be built without ceremony.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


# ══════════════════════════════════════════════════════════════
# STORE BACKENDS
# ══════════════════════════════════════════════════════════════

STORE_BACKEND_MEMORY = "memory"
STORE_BACKEND_DJANGO = "django"

VALID_STORE_BACKENDS = frozenset({STORE_BACKEND_MEMORY, STORE_BACKEND_DJANGO})

DEFAULTS = {
    "STORE_BACKEND": STORE_BACKEND_MEMORY,
    "ADMIN_IDENTITY": "admin",
    "LOG_PROCESSORS": True,
}


# ══════════════════════════════════════════════════════════════
# RUNTIME SETTINGS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RuntimeSettings:
    """
    Resolved settings for an EmbeddedRuntime.

    Fields:
        store_backend:   'memory' or 'django'.
        admin_identity:  Identity name bound to the network administrator.
        log_processors:  Log every processor invocation at INFO.
    """

    store_backend: str = STORE_BACKEND_MEMORY
    admin_identity: str = "admin"
    log_processors: bool = True

    def __post_init__(self) -> None:
        if self.store_backend not in VALID_STORE_BACKENDS:
            raise ValueError(
                f"store_backend '{self.store_backend}' not valid. "
                f"Must be one of: {sorted(VALID_STORE_BACKENDS)}"
            )
        if not self.admin_identity or not isinstance(self.admin_identity, str):
            raise ValueError("admin_identity must be a non-empty string.")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "RuntimeSettings":
        merged = {**DEFAULTS, **values}
        return cls(
            store_backend=merged["STORE_BACKEND"],
            admin_identity=merged["ADMIN_IDENTITY"],
            log_processors=bool(merged["LOG_PROCESSORS"]),
        )


def get_runtime_settings(overrides: Optional[Mapping[str, Any]] = None) -> RuntimeSettings:
    """Read BUSINESS_NETWORKS from Django settings, applying overrides."""
    try:
        configured: Mapping[str, Any] = getattr(settings, "BUSINESS_NETWORKS", {})
    except ImproperlyConfigured:
        configured = {}
    return RuntimeSettings.from_mapping({**configured, **(overrides or {})})
