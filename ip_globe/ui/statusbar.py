#!/usr/bin/env python3
# ip_globe/ui/statusbar.py

from __future__ import annotations
from prompt_toolkit.widgets import Label

from ip_globe.ui.map_control import FrameControl
from ip_globe.version import version_info

class StatusBar:
    """Key hints along the bottom edge."""

    def __init__(self, control: FrameControl):
        self.control = control
        self.label = Label(self._text, style="class:keys")

    def __pt_container__(self):
        return self.label

    def _text(self) -> str:
        return (
            f" r Refresh   q/Esc Quit   "
            f"render={self.control.last_render_ms:.1f}ms   {version_info()}"
        )
