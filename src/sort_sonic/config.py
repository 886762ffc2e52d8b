"""Configuration persistence for SortSonic."""

from __future__ import annotations

from dataclasses import asdict, dataclass
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from rich.color import Color, ColorParseError

from sort_sonic.visualization.glyphs import MAX_UNITS_PER_ROW

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortConfig:
    """Immutable run configuration loaded from disk."""

    elements: int = 100
    delay_ms: int = 10
    units_per_row: int = 4
    base_color: str = "white"
    accent_color: str = "red"
    tone_scale_hz: float = 10.0
    tone_ms: int = 10
    volume: float = 0.2
    sample_rate: int = 44100
    algorithm: Optional[str] = None

    @property
    def delay(self) -> float:
        """Pacing delay in seconds."""
        return self.delay_ms / 1000.0

    @property
    def tone_duration(self) -> float:
        return self.tone_ms / 1000.0

    def with_overrides(self, **overrides: Any) -> "SortConfig":
        """Return a copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        return _config_from_mapping({**asdict(self), **values})


def get_config_dir(app_name: str = "sort-sonic") -> Path:
    """Return the per-user config directory for the current platform."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            root = Path(base)
        else:
            root = Path.home() / "AppData" / "Roaming"
        return _ensure_dir(root / app_name)
    elif os.name == "posix":
        if _is_macos():
            return _ensure_dir(
                Path.home() / "Library" / "Application Support" / app_name
            )
        base = os.environ.get("XDG_CONFIG_HOME")
        root = Path(base) if base else Path.home() / ".config"
        return _ensure_dir(root / app_name)
    else:
        return _ensure_dir(Path.home() / ".config" / app_name)


def get_config_path() -> Path:
    """Return the full config file path."""
    return get_config_dir() / "config.json"


def load_config() -> SortConfig:
    """Load configuration from disk, falling back to defaults on error."""
    path = get_config_path()
    if not path.exists():
        return SortConfig()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.exception("Failed to load config from %s", path)
        return SortConfig()
    if not isinstance(raw, dict):
        return SortConfig()
    return _config_from_mapping(raw)


def save_config(cfg: SortConfig) -> None:
    """Persist configuration to disk atomically."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(".tmp")
    temp_path.write_text(json.dumps(asdict(cfg), indent=2), encoding="utf-8")
    os.replace(temp_path, path)


def _ensure_dir(path: Path) -> Path:
    """Create the directory if needed and return the path."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def _is_macos() -> bool:
    """Return True when running on macOS."""
    return os.uname().sysname == "Darwin" if hasattr(os, "uname") else False


def _get_int(
    raw: dict[str, Any],
    key: str,
    default: int,
    *,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """Fetch an integer value with optional clamping."""
    value = raw.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool):
        value = default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def _get_float(
    raw: dict[str, Any],
    key: str,
    default: float,
    *,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """Fetch a numeric value as float with optional clamping."""
    value = raw.get(key, default)
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        value = default
    value = float(value)
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def _get_color(raw: dict[str, Any], key: str, default: str) -> str:
    """Fetch a color name that rich can parse."""
    value = raw.get(key, default)
    if not isinstance(value, str) or not value:
        return default
    try:
        Color.parse(value)
    except ColorParseError:
        logger.warning("Ignoring unknown color %r for %s", value, key)
        return default
    return value


def _config_from_mapping(raw: dict[str, Any]) -> SortConfig:
    """Normalize raw JSON data into a SortConfig."""
    defaults = SortConfig()
    algorithm = raw.get("algorithm")
    if algorithm is not None and not isinstance(algorithm, str):
        algorithm = None
    return SortConfig(
        elements=_get_int(raw, "elements", defaults.elements, min_value=1),
        delay_ms=_get_int(raw, "delay_ms", defaults.delay_ms, min_value=0),
        units_per_row=_get_int(
            raw,
            "units_per_row",
            defaults.units_per_row,
            min_value=1,
            max_value=MAX_UNITS_PER_ROW,
        ),
        base_color=_get_color(raw, "base_color", defaults.base_color),
        accent_color=_get_color(raw, "accent_color", defaults.accent_color),
        tone_scale_hz=_get_float(
            raw, "tone_scale_hz", defaults.tone_scale_hz, min_value=0.0
        ),
        tone_ms=_get_int(raw, "tone_ms", defaults.tone_ms, min_value=1),
        volume=_get_float(raw, "volume", defaults.volume, min_value=0.0, max_value=1.0),
        sample_rate=_get_int(raw, "sample_rate", defaults.sample_rate, min_value=8000),
        algorithm=algorithm,
    )
