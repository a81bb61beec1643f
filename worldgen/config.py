"""Generator settings persisted as JSON.

Uses platformdirs for a cross-platform config location:
  Linux:   ~/.config/worldgen/config.json
  macOS:   ~/Library/Application Support/worldgen/config.json
  Windows: C:/Users/.../AppData/Local/worldgen/config.json
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from platformdirs import user_config_dir

from .constants import INITIAL_NAME, INITIAL_UPP, SATELLITE_RETRY_LIMIT

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(user_config_dir("worldgen"))
CONFIG_FILE = CONFIG_DIR / "config.json"


@dataclass
class GeneratorConfig:
    """User-tunable knobs. Anything missing from the file keeps its default."""

    show_empty_orbits: bool = False
    satellite_orbit_retry_limit: int = SATELLITE_RETRY_LIMIT
    log_level: str = "WARNING"
    default_name: str = INITIAL_NAME
    default_upp: str = INITIAL_UPP

    @property
    def level(self) -> int:
        """``log_level`` as a logging constant; unknown names fall back to WARNING."""
        value = logging.getLevelName(self.log_level.upper())
        return value if isinstance(value, int) else logging.WARNING


def _config_from_dict(d: dict) -> GeneratorConfig:
    """Build a config from parsed JSON, keeping only known keys of the right type."""
    defaults = GeneratorConfig()
    values = {}
    for f in fields(GeneratorConfig):
        if f.name not in d:
            continue
        value = d[f.name]
        expected = type(getattr(defaults, f.name))
        # bool is an int subclass, so check it both ways
        if (isinstance(value, bool) and expected is not bool) or not isinstance(value, expected):
            logger.warning("Ignoring config value %s=%r; expected %s", f.name, value, expected.__name__)
            continue
        values[f.name] = value
    return GeneratorConfig(**values)


def load_config(path: Path | None = None) -> GeneratorConfig:
    """Read settings from JSON. Returns defaults if the file is missing or unreadable."""
    path = path if path is not None else CONFIG_FILE
    if not path.exists():
        return GeneratorConfig()
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, UnicodeDecodeError, IOError):
        logger.warning("Could not read config %s; using defaults", path)
        return GeneratorConfig()
    if not isinstance(data, dict):
        return GeneratorConfig()
    return _config_from_dict(data)


def save_config(config: GeneratorConfig, path: Path | None = None) -> Path:
    """Serialize settings to JSON and return the path written."""
    path = path if path is not None else CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(config), indent=2))
    return path
