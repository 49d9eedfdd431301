"""
Tests for environment-backed settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from salary_dashboard.settings import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        settings = Settings()

        assert settings.data_path == Path("ds_salaries.csv")
        assert settings.sankey_width == 620.0
        assert settings.sankey_height == 250.0
        assert settings.node_width == 15.0
        assert settings.node_padding == 10.0
        assert settings.min_node_height == 1.0
        assert not settings.strict_node_names
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SALARY_DASHBOARD_SANKEY_WIDTH", "900")
        monkeypatch.setenv("SALARY_DASHBOARD_STRICT_NODE_NAMES", "true")
        settings = Settings()

        assert settings.sankey_width == 900.0
        assert settings.strict_node_names

    def test_log_level_normalized(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_invalid_canvas(self) -> None:
        with pytest.raises(ValidationError):
            Settings(sankey_height=0)
        with pytest.raises(ValidationError):
            Settings(node_padding=-1)


class TestGetSettings:
    """Tests for the cached accessor."""

    def test_cached(self) -> None:
        get_settings.cache_clear()
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        get_settings.cache_clear()
        monkeypatch.setenv("SALARY_DASHBOARD_NODE_WIDTH", "20")
        try:
            assert get_settings().node_width == 20.0
        finally:
            get_settings.cache_clear()
