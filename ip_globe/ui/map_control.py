#!/usr/bin/env python3
# ip_globe/ui/map_control.py
"""prompt_toolkit UIControl that draws one complete globe frame per repaint."""

from __future__ import annotations

import time
from typing import Callable, List, Optional

from prompt_toolkit.layout.controls import UIContent, UIControl

from ip_globe.rendering.renderer import Frame, LineFrag, Renderer
from ip_globe.session import SessionState


class FrameControl(UIControl):
    """Render the status row and map for the current session state."""

    def __init__(
        self,
        renderer: Renderer,
        get_state: Callable[[], SessionState],
        tick_s: float = 0.25,
    ):
        self.renderer = renderer
        self.get_state = get_state
        self.tick_s = max(0.01, float(tick_s))
        self.last_render_ms = 0.0
        self.last_frame: Optional[Frame] = None

    # -------- UIControl interface --------

    def is_focusable(self) -> bool:
        return True

    def preferred_width(self, max_available_width: int) -> int:
        return max_available_width

    def preferred_height(
        self,
        width: int,
        max_available_height: int,
        wrap_lines: bool,
        get_line_prefix,
    ) -> int:
        return max_available_height

    def create_content(self, width: int, height: int) -> UIContent:
        width = max(1, int(width))
        height = max(1, int(height))

        t0 = time.time()
        frame = self.renderer.render(self.get_state(), self._spinner_step())
        self.last_frame = frame
        lines = self._fit(frame, width, height)
        self.last_render_ms = (time.time() - t0) * 1000.0

        return UIContent(
            get_line=lambda i: lines[i] if 0 <= i < height else [("", " " * width)],
            line_count=height,
        )

    # -------- helpers --------

    def _spinner_step(self) -> int:
        return int(time.monotonic() / self.tick_s)

    @staticmethod
    def _fit_runs(line: LineFrag, width: int, pad_style: str = "") -> LineFrag:
        """Crop or pad styled runs to exactly `width` characters."""
        out: LineFrag = []
        used = 0
        for style, text in line:
            if used >= width:
                break
            take = text[: width - used]
            out.append((style, take))
            used += len(take)
        if used < width:
            out.append((pad_style, " " * (width - used)))
        return out

    @classmethod
    def _fit(cls, frame: Frame, width: int, height: int) -> List[LineFrag]:
        header: LineFrag = []
        if frame.title:
            header.append(("class:status.title", f" {frame.title} "))
            header.append((frame.status_style, " "))
        header.append((frame.status_style, frame.status))
        lines: List[LineFrag] = [cls._fit_runs(header, width, frame.status_style)]
        for row in frame.lines[: height - 1]:
            lines.append(cls._fit_runs(row, width))
        while len(lines) < height:
            lines.append([("", " " * width)])
        return lines
