"""Tests for dietscan config loading."""

import os
import tempfile

from dietscan import __version__
from dietscan.config import CatalogConfig, DietScanConfig, ScannerConfig, load_config


def _load_toml(content: bytes) -> DietScanConfig:
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(content)
        f.flush()
        config = load_config(f.name)
    os.unlink(f.name)
    return config


def test_load_config_defaults(monkeypatch):
    """Loading with no path returns all defaults."""
    monkeypatch.delenv("DIETSCAN_CATALOG_URL", raising=False)
    monkeypatch.delenv("DIETSCAN_CAMERA", raising=False)

    config = load_config()
    assert isinstance(config, DietScanConfig)
    assert config.catalog.base_url == "https://world.openfoodfacts.org"
    assert config.catalog.timeout == 10.0
    assert config.catalog.user_agent == f"dietscan/{__version__}"
    assert config.scanner.camera_index == 0
    assert config.scanner.fps == 5
    assert config.scanner.box_size == 250


def test_load_config_nonexistent_file(monkeypatch):
    """Loading a nonexistent file returns defaults."""
    monkeypatch.delenv("DIETSCAN_CAMERA", raising=False)
    config = load_config("/nonexistent/path.toml")
    assert config.scanner == ScannerConfig()


def test_load_config_from_toml():
    """Loading a valid TOML file populates config."""
    config = _load_toml(b"""\
[catalog]
base_url = "https://uk.openfoodfacts.org/"
timeout = 3
user_agent = "my-app/2.0"

[scanner]
camera_index = 1
fps = 10
box_size = 0
""")
    assert config.catalog == CatalogConfig(
        base_url="https://uk.openfoodfacts.org",
        timeout=3.0,
        user_agent="my-app/2.0",
    )
    assert config.scanner == ScannerConfig(camera_index=1, fps=10, box_size=0)


def test_load_config_env_override(monkeypatch):
    """Environment variables fill in values the file leaves unset."""
    monkeypatch.setenv("DIETSCAN_CATALOG_URL", "https://staging.test")
    monkeypatch.setenv("DIETSCAN_CAMERA", "2")

    config = load_config()
    assert config.catalog.base_url == "https://staging.test"
    assert config.scanner.camera_index == 2


def test_load_config_file_takes_precedence(monkeypatch):
    """Config file values take precedence over env vars."""
    monkeypatch.setenv("DIETSCAN_CATALOG_URL", "https://env.test")
    monkeypatch.setenv("DIETSCAN_CAMERA", "4")

    config = _load_toml(b"""\
[catalog]
base_url = "https://file.test"

[scanner]
camera_index = 0
""")
    assert config.catalog.base_url == "https://file.test"
    assert config.scanner.camera_index == 0


def test_load_config_partial_toml(monkeypatch):
    """Partial TOML uses defaults for missing sections."""
    monkeypatch.delenv("DIETSCAN_CATALOG_URL", raising=False)
    config = _load_toml(b"""\
[scanner]
fps = 2
""")
    assert config.scanner.fps == 2
    assert config.scanner.box_size == 250
    assert config.catalog.base_url == "https://world.openfoodfacts.org"
