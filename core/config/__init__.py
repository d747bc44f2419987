"""
Composer Core Config — Public API
===================================
"""

from core.config.runtime import (
    STORE_BACKEND_DJANGO,
    STORE_BACKEND_MEMORY,
    RuntimeSettings,
    get_runtime_settings,
)

__all__ = [
    "RuntimeSettings",
    "get_runtime_settings",
    "STORE_BACKEND_MEMORY",
    "STORE_BACKEND_DJANGO",
]
