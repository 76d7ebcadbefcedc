#!/usr/bin/env python3
# ip_globe/styles.py
"""
Style definitions for the IP globe TUI.
Provides light, dark, and auto themes for prompt_toolkit.
"""

import os

from prompt_toolkit.styles import Style
from ip_globe.config import Config

BASE_DARK = {
    "status": "bg:#303030 #ffffff bold",
    "status.title": "bg:#005f87 #ffffff bold",
    "status.loading": "bg:#303030 #ffd75f",
    "status.error": "bg:#5f0000 #ffffff bold",
    "keys": "bg:#202020 #aaaaaa",
    "map": "#303030",
    "map.grid": "#5f5f87",
    "map.land": "#87af87",
    "map.marker": "#ff5f5f bold",
    "map.label": "#ffd75f",
}
BASE_LIGHT = {
    "status": "bg:#cccccc #000000 bold",
    "status.title": "bg:#0087af #ffffff bold",
    "status.loading": "bg:#cccccc #875f00",
    "status.error": "bg:#ffd7d7 #870000 bold",
    "keys": "bg:#dddddd #444444",
    "map": "#bcbcbc",
    "map.grid": "#8787af",
    "map.land": "#005f00",
    "map.marker": "#d70000 bold",
    "map.label": "#875f00",
}

def make_style(cfg: Config) -> Style:
    theme = cfg["ui"].get("theme", "auto")

    if theme == "light":
        return Style.from_dict(BASE_LIGHT)
    if theme == "dark":
        return Style.from_dict(BASE_DARK)

    # Auto-detect via environment
    if os.getenv("TERM_THEME", "").lower() == "light":
        return Style.from_dict(BASE_LIGHT)
    return Style.from_dict(BASE_DARK)
