#!/usr/bin/env python3
# ip_globe/rendering/renderer.py
"""
Frame renderer for the IP globe.

- Common API: Renderer.render(state, spinner_step) -> Frame
- Style format: list[list[tuple[str, str]]] suitable for prompt_toolkit
  FormattedText, one list of runs per map row.
- A Frame is always complete: status line plus every map row. The UI draws
  it in one pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from ip_globe.geo import CellKind, GeoProjector
from ip_globe.session import SessionState, Status

StyleRun = Tuple[str, str]                # (style, text)
LineFrag = List[StyleRun]                 # one terminal row as runs
FrameFrag = List[LineFrag]                # full map as rows

__all__ = [
    "Renderer",
    "Frame",
    "status_line",
    "default_styles",
    "SPINNER",
    "StyleRun",
    "LineFrag",
    "FrameFrag",
]

SPINNER = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"


def default_styles() -> Dict[CellKind, str]:
    return {
        CellKind.BACKGROUND: "class:map",
        CellKind.GRID: "class:map.grid",
        CellKind.LAND: "class:map.land",
        CellKind.MARKER: "class:map.marker",
        CellKind.LABEL: "class:map.label",
    }


def _spin(step: int) -> str:
    return SPINNER[step % len(SPINNER)]


def status_line(state: SessionState, spinner_step: int = 0) -> str:
    """One-line summary of the session for the top of the frame."""
    rec = state.last_known

    if state.status is Status.LOADING or (state.status is Status.READY and rec is None):
        return f"{_spin(spinner_step)} Fetching location..."

    if state.status is Status.ERROR:
        text = f"Error: {state.message}" if state.message else "Error"
        if rec is not None:
            text += f" | last known: {rec.city}, {rec.country}"
    else:
        text = (
            f"Location: {rec.city}, {rec.country} | "
            f"Lat: {rec.lat:.4f}°, Lon: {rec.lon:.4f}°"
        )

    if state.refresh_in_flight:
        text += f" | refreshing {_spin(spinner_step)}"
    return text


def status_style(state: SessionState) -> str:
    if state.status is Status.ERROR:
        return "class:status.error"
    if state.status is Status.LOADING or state.last_known is None:
        return "class:status.loading"
    return "class:status"


@dataclass
class Frame:
    status: str
    status_style: str
    lines: FrameFrag
    marker: Optional[Tuple[int, int]]
    title: str = ""

    def text_rows(self) -> List[str]:
        """Plain map rows, styles dropped."""
        return ["".join(text for (_style, text) in line) for line in self.lines]


@dataclass
class Renderer:
    """Turns session state plus the projected map into a Frame."""
    projector: GeoProjector
    use_color: bool = True
    show_label: bool = True
    title: str = ""

    def __post_init__(self):
        self.styles = default_styles()

    def _row_runs(self, chars: np.ndarray, kinds: np.ndarray) -> LineFrag:
        # Merge adjacent cells of the same kind into one run.
        line: LineFrag = []
        run_kind = None
        run_text: List[str] = []
        for ch, kind in zip(chars.tolist(), kinds.tolist()):
            if kind != run_kind and run_text:
                line.append((self.styles[CellKind(run_kind)], "".join(run_text)))
                run_text = []
            run_kind = kind
            run_text.append(ch)
        if run_text:
            line.append((self.styles[CellKind(run_kind)], "".join(run_text)))
        return line if line else [("", "")]

    def render(self, state: SessionState, spinner_step: int = 0) -> Frame:
        rec = state.last_known
        marker = rec.coordinate if rec is not None else None
        label = rec.city if (rec is not None and self.show_label) else None
        chars, kinds = self.projector.compose(marker, label)

        if self.use_color:
            lines = [self._row_runs(chars[y], kinds[y]) for y in range(chars.shape[0])]
        else:
            lines = [[("", "".join(chars[y].tolist()))] for y in range(chars.shape[0])]

        return Frame(
            status=status_line(state, spinner_step),
            status_style=status_style(state),
            lines=lines,
            marker=self.projector.project(marker) if marker is not None else None,
            title=self.title,
        )
