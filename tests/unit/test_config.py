"""Tests for configuration schema and loader."""

from unittest.mock import patch

import pytest
import yaml
from pydantic import ValidationError

from astro_wallpaper.config import (
    AstroWallpaperConfig,
    EarthConfig,
    MarsConfig,
    get_config_path,
    load_config,
)


@pytest.fixture(autouse=True)
def no_env_key(monkeypatch):
    monkeypatch.delenv("NASA_API_KEY", raising=False)


class TestSchema:
    """Defaults and validation."""

    def test_defaults(self):
        config = AstroWallpaperConfig()

        assert config.providers == ["mars", "earth", "epic"]
        assert config.nasa.api_key == "DEMO_KEY"
        assert config.nasa.api_base == "https://api.nasa.gov"
        assert config.nasa.epic_archive_base == "https://epic.gsfc.nasa.gov/archive/natural"
        assert config.mars.rover == "curiosity"
        assert config.mars.max_days == 30
        assert config.earth.coordinate_attempts == 5
        assert config.earth.max_days == 3
        assert config.earth.dim == 0.2
        assert config.http.timeout == 30.0
        assert config.resolution.deadline is None
        assert config.output.verbosity == "normal"

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValidationError):
            AstroWallpaperConfig(providers=["venus"])

    def test_empty_providers_rejected(self):
        with pytest.raises(ValidationError):
            AstroWallpaperConfig(providers=[])

    def test_bounds(self):
        with pytest.raises(ValidationError):
            MarsConfig(max_days=0)
        with pytest.raises(ValidationError):
            EarthConfig(coordinate_attempts=0)

    def test_extra_ignored(self):
        config = AstroWallpaperConfig(wallpaper_mode="stretch", mars={"camera": "FHAZ"})
        assert not hasattr(config, "wallpaper_mode")


class TestLoader:
    """load_config() file handling."""

    def test_creates_defaults_when_missing(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"

        config = load_config(path)

        assert path.exists()
        assert config == AstroWallpaperConfig()
        written = yaml.safe_load(path.read_text())
        assert written["mars"]["max_days"] == 30
        assert written["providers"] == ["mars", "earth", "epic"]

    def test_reads_existing(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.safe_dump(
                {"providers": ["epic"], "nasa": {"api_key": "abc"}, "earth": {"max_days": 5}}
            )
        )

        config = load_config(path)

        assert config.providers == ["epic"]
        assert config.nasa.api_key == "abc"
        assert config.earth.max_days == 5
        assert config.mars.max_days == 30

    def test_empty_file_is_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path) == AstroWallpaperConfig()

    def test_env_overrides_api_key(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"nasa": {"api_key": "from-file"}}))
        monkeypatch.setenv("NASA_API_KEY", "from-env")

        assert load_config(path).nasa.api_key == "from-env"

    def test_env_key_not_written_to_new_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        monkeypatch.setenv("NASA_API_KEY", "secret")

        config = load_config(path)

        assert config.nasa.api_key == "secret"
        assert "secret" not in path.read_text()

    def test_non_mapping_file_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- mars\n- epic\n")

        with pytest.raises(ValueError, match="top level must be a mapping"):
            load_config(path)

    def test_invalid_file_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"mars": {"max_days": -1}}))

        with pytest.raises(ValidationError):
            load_config(path)

    def test_default_path(self, tmp_path):
        with patch("astro_wallpaper.config.loader.user_config_path", return_value=tmp_path) as mock_dir:
            assert get_config_path() == tmp_path / "config.yaml"

        mock_dir.assert_called_once_with("astro-wallpaper", ensure_exists=True)
