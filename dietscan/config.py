"""TOML configuration loader for dietscan."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from . import __version__

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

DEFAULT_CATALOG_URL = "https://world.openfoodfacts.org"
DEFAULT_USER_AGENT = f"dietscan/{__version__}"


@dataclass
class CatalogConfig:
    base_url: str = DEFAULT_CATALOG_URL
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class ScannerConfig:
    camera_index: int = 0
    fps: int = 5
    box_size: int = 250  # square region of interest in px, 0 = full frame


@dataclass
class DietScanConfig:
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    scanner: ScannerConfig = field(default_factory=ScannerConfig)


def load_config(path: str | Path | None = None) -> DietScanConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The catalog URL and camera index can be overridden via environment
    variables when the file leaves them unset.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cat = raw.get("catalog", {})
    scn = raw.get("scanner", {})

    # Resolve overrides: config file → environment variable → default
    base_url = cat.get("base_url") or os.environ.get(
        "DIETSCAN_CATALOG_URL", DEFAULT_CATALOG_URL
    )
    camera_index = scn.get("camera_index")
    if camera_index is None:
        camera_index = int(os.environ.get("DIETSCAN_CAMERA", "0"))

    return DietScanConfig(
        catalog=CatalogConfig(
            base_url=base_url.rstrip("/"),
            timeout=float(cat.get("timeout", 10.0)),
            user_agent=cat.get("user_agent", DEFAULT_USER_AGENT),
        ),
        scanner=ScannerConfig(
            camera_index=camera_index,
            fps=scn.get("fps", 5),
            box_size=scn.get("box_size", 250),
        ),
    )
