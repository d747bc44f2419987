"""
Tests for core.config — embedded runtime settings.
"""

import pytest
from django.test import override_settings

from core.config import (
    STORE_BACKEND_DJANGO,
    STORE_BACKEND_MEMORY,
    RuntimeSettings,
    get_runtime_settings,
)


class TestRuntimeSettings:
    def test_defaults(self):
        settings = RuntimeSettings()
        assert settings.store_backend == STORE_BACKEND_MEMORY
        assert settings.admin_identity == "admin"
        assert settings.log_processors is True

    def test_invalid_store_backend(self):
        with pytest.raises(ValueError, match="not valid"):
            RuntimeSettings(store_backend="redis")

    def test_empty_admin_identity(self):
        with pytest.raises(ValueError, match="admin_identity"):
            RuntimeSettings(admin_identity="")

    def test_from_mapping_fills_defaults(self):
        settings = RuntimeSettings.from_mapping({"STORE_BACKEND": STORE_BACKEND_DJANGO})
        assert settings.store_backend == STORE_BACKEND_DJANGO
        assert settings.admin_identity == "admin"

    def test_frozen_immutability(self):
        settings = RuntimeSettings()
        with pytest.raises(Exception):
            settings.store_backend = STORE_BACKEND_DJANGO


class TestGetRuntimeSettings:
    @override_settings(BUSINESS_NETWORKS={"ADMIN_IDENTITY": "root", "LOG_PROCESSORS": False})
    def test_reads_django_settings(self):
        settings = get_runtime_settings()
        assert settings.admin_identity == "root"
        assert settings.log_processors is False
        assert settings.store_backend == STORE_BACKEND_MEMORY

    @override_settings(BUSINESS_NETWORKS={"ADMIN_IDENTITY": "root"})
    def test_overrides_win(self):
        assert get_runtime_settings({"ADMIN_IDENTITY": "ops"}).admin_identity == "ops"
