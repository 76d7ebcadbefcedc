#!/usr/bin/env python3
# ip_globe/config.py
"""
Config loader/saver and defaults for the IP globe.

Goals:
- Single JSON file per user.
- Safe atomic writes.
- Deep-merge of user config over defaults.
- Basic validation with sane fallbacks.
- No external deps.

Usage:
    from ip_globe.config import Config, DEFAULT_CONFIG
    cfg = Config.load()                 # ~/.config/ip_globe/ip_globe.json or OS-specific
    endpoint = cfg["network"]["endpoint"]
    cfg["ui"]["theme"] = "dark"
    cfg.save()
"""

from __future__ import annotations

import copy
import json
import logging
import os
import platform
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

log = logging.getLogger(__name__)

# ----------------------------
# Defaults
# ----------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    "app": {
        "title": "GPS Globe",
        "refresh_interval_s": 0.25,      # spinner tick / redraw cadence
    },
    "map": {
        "rows": 30,                      # fixed grid; 4:1 keeps degrees square-ish
        "cols": 120,
        "grid_lat_step": 15.0,
        "grid_lon_step": 30.0,
        "marker_char": "●",
        "land_char": "#",
        "grid_char": "·",
        "show_label": True,              # city name beside the marker
    },
    "network": {
        "endpoint": "http://ip-api.com/json/",
        "user_agent": "ip-globe/1.0 (+https://example.invalid)",
        "timeout_s": 5.0,
    },
    "ui": {
        "theme": "auto",                 # auto | light | dark
        "color": True,
    },
    "logging": {
        "level": "INFO",
        "http_debug": False,
        "file": None,                    # path or None
        "rotate_bytes": 5 * 1024 * 1024,
        "rotate_keep": 3,
    },
}

# ----------------------------
# Helpers
# ----------------------------

def _os_config_home() -> str:
    """Return per-OS config base directory."""
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return os.path.join(base, "IpGlobe")
    # macOS: ~/Library/Application Support/IpGlobe
    if platform.system() == "Darwin":
        return os.path.join(os.path.expanduser("~/Library/Application Support"), "IpGlobe")
    # Linux and others: ~/.config/ip_globe
    return os.path.join(os.path.expanduser("~/.config"), "ip_globe")

def _default_config_path() -> str:
    """Resolve default config path, honoring IP_GLOBE_CONFIG env override."""
    env = os.environ.get("IP_GLOBE_CONFIG")
    if env:
        return os.path.expanduser(env)
    return os.path.join(_os_config_home(), "ip_globe.json")

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Return deep-merged copy of dicts: values in b override a."""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _atomic_write_json(path: str, data: Dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp_cfg_", dir=os.path.dirname(path) or ".")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp, path)
    except Exception:
        # Clean temp on error
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise

def _coerce_num(v: Any, default: float, minmax: Optional[Tuple[float, float]] = None) -> float:
    try:
        x = float(v)
    except (TypeError, ValueError):
        return float(default)
    if x != x:  # NaN
        return float(default)
    if minmax:
        lo, hi = minmax
        if x < lo: x = lo
        if x > hi: x = hi
    return x

def _coerce_int(v: Any, default: int, minmax: Optional[Tuple[int, int]] = None) -> int:
    try:
        x = int(v)
    except (TypeError, ValueError):
        return int(default)
    if minmax:
        lo, hi = minmax
        if x < lo: x = lo
        if x > hi: x = hi
    return x

def _coerce_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"): return True
        if s in ("0", "false", "no", "off"): return False
    return default

def _coerce_char(v: Any, default: str) -> str:
    """Exactly one printable character, else the default."""
    if isinstance(v, str) and len(v) == 1 and v.isprintable():
        return v
    return default

# ----------------------------
# Validation
# ----------------------------

def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated copy with fallbacks applied."""
    c = _deep_merge(copy.deepcopy(DEFAULT_CONFIG), cfg or {})
    for section, defaults in DEFAULT_CONFIG.items():
        if not isinstance(c.get(section), dict):
            c[section] = copy.deepcopy(defaults)

    # app
    a = c["app"]
    a["title"] = str(a.get("title") or DEFAULT_CONFIG["app"]["title"])
    a["refresh_interval_s"] = _coerce_num(a.get("refresh_interval_s"), 0.25, (0.05, 5.0))

    # map
    m = c["map"]
    m["rows"] = _coerce_int(m.get("rows"), DEFAULT_CONFIG["map"]["rows"], (8, 200))
    m["cols"] = _coerce_int(m.get("cols"), DEFAULT_CONFIG["map"]["cols"], (16, 400))
    m["grid_lat_step"] = _coerce_num(m.get("grid_lat_step"), 15.0, (1.0, 90.0))
    m["grid_lon_step"] = _coerce_num(m.get("grid_lon_step"), 30.0, (1.0, 180.0))
    for key in ("marker_char", "land_char", "grid_char"):
        m[key] = _coerce_char(m.get(key), DEFAULT_CONFIG["map"][key])
    m["show_label"] = _coerce_bool(m.get("show_label"), DEFAULT_CONFIG["map"]["show_label"])

    # network
    n = c["network"]
    n["endpoint"] = str(n.get("endpoint") or DEFAULT_CONFIG["network"]["endpoint"])
    n["user_agent"] = str(n.get("user_agent") or DEFAULT_CONFIG["network"]["user_agent"])
    n["timeout_s"] = _coerce_num(n.get("timeout_s"), 5.0, (0.5, 60.0))

    # ui
    ui = c["ui"]
    if ui.get("theme") not in ("auto", "light", "dark"):
        ui["theme"] = DEFAULT_CONFIG["ui"]["theme"]
    ui["color"] = _coerce_bool(ui.get("color"), DEFAULT_CONFIG["ui"]["color"])

    # logging
    lg = c["logging"]
    if lg.get("level") not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
        lg["level"] = DEFAULT_CONFIG["logging"]["level"]
    lg["http_debug"] = _coerce_bool(lg.get("http_debug"), DEFAULT_CONFIG["logging"]["http_debug"])
    lf = lg.get("file")
    lg["file"] = str(lf) if lf else None
    lg["rotate_bytes"] = _coerce_int(lg.get("rotate_bytes"), DEFAULT_CONFIG["logging"]["rotate_bytes"], (256 * 1024, 50 * 1024 * 1024))
    lg["rotate_keep"]  = _coerce_int(lg.get("rotate_keep"), DEFAULT_CONFIG["logging"]["rotate_keep"], (0, 50))

    return c

# ----------------------------
# Public API
# ----------------------------

@dataclass
class Config:
    """Thin wrapper around a nested dict with load/save/merge."""
    data: Dict[str, Any] = field(default_factory=lambda: json.loads(json.dumps(DEFAULT_CONFIG)))
    path: str = field(default_factory=_default_config_path)

    # --- Mapping-style access
    def __getitem__(self, k: str) -> Any:
        return self.data[k]

    def __setitem__(self, k: str, v: Any) -> None:
        self.data[k] = v

    def get(self, k: str, default: Any = None) -> Any:
        return self.data.get(k, default)

    # --- Ops
    @classmethod
    def load(cls, path: Optional[str] = None, create_if_missing: bool = True) -> "Config":
        cfg_path = os.path.expanduser(path) if path else _default_config_path()
        if not os.path.exists(cfg_path):
            cfg = _validate(DEFAULT_CONFIG)
            if create_if_missing:
                try:
                    _atomic_write_json(cfg_path, cfg)
                except OSError as e:
                    log.warning("Could not write default config to %s: %s", cfg_path, e)
            return cls(cfg, cfg_path)

        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                user_cfg = json.load(f)
            if not isinstance(user_cfg, dict):
                raise ValueError("config root must be an object")
        except (OSError, ValueError) as e:
            # Corrupt file. Backup and regenerate.
            log.warning("Config %s unreadable (%s); using defaults", cfg_path, e)
            backup = cfg_path + ".corrupt.bak"
            try:
                shutil.copyfile(cfg_path, backup)
            except OSError:
                pass
            user_cfg = {}

        return cls(_validate(user_cfg), cfg_path)

    def save(self) -> None:
        """Persist to JSON atomically."""
        full = _validate(self.data)
        _atomic_write_json(self.path, full)
        self.data = full  # sync in-memory with normalized values

    def update(self, partial: Dict[str, Any]) -> None:
        """Deep-merge a partial config then validate."""
        merged = _deep_merge(self.data, partial)
        self.data = _validate(merged)

    # Convenience getters
    @property
    def endpoint(self) -> str:
        return self.data["network"]["endpoint"]

    @property
    def grid_size(self) -> Tuple[int, int]:
        return self.data["map"]["rows"], self.data["map"]["cols"]


__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "_default_config_path",
]
