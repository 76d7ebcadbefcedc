#!/usr/bin/env python3
# ip_globe/geo.py
"""
Equirectangular projection onto a fixed character grid.

Maps latitude/longitude to (row, col) cells and builds the base map buffer:
reference grid points, the embedded world outline, then the user's
marker and its city label on top. Everything here is deterministic; the same
inputs always give the same cells.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from ip_globe.world import OUTLINES, Polyline

__all__ = [
    "Coordinate",
    "CellKind",
    "GridCell",
    "GeoProjector",
    "project",
    "cell_for",
    "clamp_lat",
    "wrap_lon",
    "MARKER_CHAR",
]

MAX_LAT = 90.0
MAX_LON = 180.0

MARKER_CHAR = "●"
LAND_CHAR = "#"
GRID_CHAR = "·"


def clamp_lat(lat: float) -> float:
    """Clamp latitude to [-90, 90]."""
    return max(min(lat, MAX_LAT), -MAX_LAT)


def wrap_lon(lon: float) -> float:
    """Wrap longitude to [-180, 180]. Exactly ±180 is kept as given."""
    if -MAX_LON <= lon <= MAX_LON:
        return lon
    return ((lon + 180.0) % 360.0) - 180.0


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lon: float

    @classmethod
    def normalized(cls, lat: float, lon: float) -> "Coordinate":
        """Build a coordinate with latitude clamped and longitude wrapped."""
        return cls(clamp_lat(float(lat)), wrap_lon(float(lon)))

    def in_range(self) -> bool:
        return -MAX_LAT <= self.lat <= MAX_LAT and -MAX_LON <= self.lon <= MAX_LON


class CellKind(IntEnum):
    BACKGROUND = 0
    GRID = 1
    LAND = 2
    MARKER = 3
    LABEL = 4


@dataclass(frozen=True)
class GridCell:
    row: int
    col: int
    char: str
    kind: CellKind


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def project(lat: float, lon: float, rows: int, cols: int) -> Tuple[int, int]:
    """
    Project (lat, lon) onto a rows x cols grid.

    col = round((lon + 180) / 360 * (cols - 1))
    row = round((90 - lat) / 180 * (rows - 1))

    Both are clamped into the grid so poles and the antimeridian stay in bounds.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ValueError(f"non-finite coordinate ({lat}, {lon})")

    col = _round_half_up((lon + 180.0) / 360.0 * (cols - 1))
    row = _round_half_up((90.0 - lat) / 180.0 * (rows - 1))
    col = max(0, min(cols - 1, col))
    row = max(0, min(rows - 1, row))
    return row, col


def cell_for(
    coord: Coordinate,
    rows: int,
    cols: int,
    kind: CellKind = CellKind.MARKER,
    char: str = MARKER_CHAR,
) -> GridCell:
    row, col = project(coord.lat, coord.lon, rows, cols)
    return GridCell(row, col, char, kind)


def _frange(start: float, stop: float, step: float) -> Iterable[float]:
    """Inclusive float range; stop is included when it lands on a step."""
    n = int(math.floor((stop - start) / step + 1e-9))
    for i in range(n + 1):
        yield start + i * step


class GeoProjector:
    """
    Projects the static world outline and reference grid into a character
    buffer of fixed size, and overlays a location marker.

    The base buffer is built once per instance and copied out on every call,
    so callers may scribble on what they receive.
    """

    def __init__(
        self,
        rows: int = 30,
        cols: int = 120,
        grid_lat_step: float = 15.0,
        grid_lon_step: float = 30.0,
        marker_char: str = MARKER_CHAR,
        land_char: str = LAND_CHAR,
        grid_char: str = GRID_CHAR,
        outlines: Tuple[Polyline, ...] = OUTLINES,
        label_dx: int = 2,
        label_dy: int = -1,
    ):
        if rows < 1 or cols < 1:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
        if grid_lat_step <= 0 or grid_lon_step <= 0:
            raise ValueError("grid steps must be positive")
        self.rows = int(rows)
        self.cols = int(cols)
        self.grid_lat_step = float(grid_lat_step)
        self.grid_lon_step = float(grid_lon_step)
        self.marker_char = marker_char
        self.land_char = land_char
        self.grid_char = grid_char
        self.outlines = outlines
        self.label_dx = int(label_dx)
        self.label_dy = int(label_dy)

        self._chars: Optional[np.ndarray] = None
        self._kinds: Optional[np.ndarray] = None

    # -------------
    # Projection
    # -------------

    def project(self, coord: Coordinate) -> Tuple[int, int]:
        return project(coord.lat, coord.lon, self.rows, self.cols)

    def marker_cell(self, coord: Coordinate) -> GridCell:
        return cell_for(coord, self.rows, self.cols, CellKind.MARKER, self.marker_char)

    def label_cells(self, coord: Coordinate, text: str) -> List[GridCell]:
        """
        Cells for a text label beside the marker, offset by (label_dy,
        label_dx) from the marker cell.

        The label row is clamped into the grid, so a marker on the top row
        gets its label on the same row. Text running past the east edge is
        cut off. Non-printable characters become spaces.
        """
        marker_row, marker_col = self.project(coord)
        row = max(0, min(self.rows - 1, marker_row + self.label_dy))
        out: List[GridCell] = []
        for i, ch in enumerate(text):
            c = marker_col + self.label_dx + i
            if c >= self.cols:
                break
            if c < 0 or (row, c) == (marker_row, marker_col):
                continue  # never cover the marker
            out.append(GridCell(row, c, ch if ch.isprintable() else " ", CellKind.LABEL))
        return out

    # -------------
    # Base buffer
    # -------------

    def _outline_mask(self) -> np.ndarray:
        """Rasterize outline polylines on a cols x rows bitmap."""
        img = Image.new("L", (self.cols, self.rows), 0)
        draw = ImageDraw.Draw(img)
        for line in self.outlines:
            prev_lon: Optional[float] = None
            prev_xy: Optional[Tuple[int, int]] = None
            for lat, lon in line:
                row, col = project(lat, lon, self.rows, self.cols)
                xy = (col, row)
                # A jump of more than half the globe means the segment wraps
                # around the antimeridian; don't smear it across the map.
                if prev_xy is not None and abs(lon - prev_lon) <= 180.0:
                    draw.line([prev_xy, xy], fill=255, width=1)
                else:
                    draw.point(xy, fill=255)
                prev_lon, prev_xy = lon, xy
        return np.asarray(img) > 0

    def _build(self) -> None:
        chars = np.full((self.rows, self.cols), " ", dtype="<U1")
        kinds = np.full((self.rows, self.cols), CellKind.BACKGROUND, dtype=np.uint8)

        for lat in _frange(-MAX_LAT, MAX_LAT, self.grid_lat_step):
            for lon in _frange(-MAX_LON, MAX_LON, self.grid_lon_step):
                row, col = project(lat, lon, self.rows, self.cols)
                chars[row, col] = self.grid_char
                kinds[row, col] = CellKind.GRID

        land = self._outline_mask()
        chars[land] = self.land_char
        kinds[land] = CellKind.LAND

        self._chars = chars
        self._kinds = kinds

    def base_buffer(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return copies of (chars, kinds) without any marker."""
        if self._chars is None:
            self._build()
        return self._chars.copy(), self._kinds.copy()

    def _overlay(self, marker: Optional[Coordinate], label: Optional[str]) -> List[GridCell]:
        if marker is None:
            return []
        out = [self.marker_cell(marker)]
        if label:
            out.extend(self.label_cells(marker, label))
        return out

    def compose(
        self,
        marker: Optional[Coordinate] = None,
        label: Optional[str] = None,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Base buffer with the marker and its label, if any, drawn on top."""
        chars, kinds = self.base_buffer()
        for cell in self._overlay(marker, label):
            chars[cell.row, cell.col] = cell.char
            kinds[cell.row, cell.col] = cell.kind
        return chars, kinds

    def cells(
        self,
        marker: Optional[Coordinate] = None,
        label: Optional[str] = None,
    ) -> List[GridCell]:
        """All non-background cells in row-major order, then marker, then label."""
        chars, kinds = self.base_buffer()
        out: List[GridCell] = []
        rows, cols = np.nonzero(kinds)
        for r, c in zip(rows.tolist(), cols.tolist()):
            out.append(GridCell(r, c, str(chars[r, c]), CellKind(int(kinds[r, c]))))
        out.extend(self._overlay(marker, label))
        return out
