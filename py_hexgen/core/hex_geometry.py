"""
Hex grid geometry.

This module implements the coordinate spaces used by the generators:
- Axial coordinates (q, r), the canonical cell identity
- Offset coordinates (col, row), the display/storage address
- Pixel positions for a given GridConfig

All conversions are pure functions of (coordinate, GridConfig). Neighbor
lookup, hex distance and spiral traversal only depend on axial coordinates.
"""

import math
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

SQRT3 = math.sqrt(3)


class Orientation(str, Enum):
    """Hex orientation."""

    POINTY_TOP = "pointy-top"
    FLAT_TOP = "flat-top"


class OffsetParity(str, Enum):
    """Which rows (pointy-top) or columns (flat-top) are shifted."""

    ODD = "odd"
    EVEN = "even"


class AxialCoord(NamedTuple):
    """Axial hex address."""

    q: int
    r: int


class OffsetCoord(NamedTuple):
    """Offset (col, row) hex address."""

    col: int
    row: int


class PixelPoint(NamedTuple):
    """Pixel position of a hex center."""

    x: float
    y: float


class ViewBox(NamedTuple):
    """Bounding box of a set of hexes in pixel space."""

    min_x: float
    min_y: float
    width: float
    height: float


class GridConfig(BaseModel):
    """Grid configuration supplied by the caller. Never mutated."""

    model_config = ConfigDict(frozen=True)

    orientation: Orientation = Field(
        default=Orientation.POINTY_TOP, description="Hex orientation"
    )
    hex_size: float = Field(
        default=32.0, gt=0, description="Hex radius (center to vertex)"
    )
    origin_x: float = Field(default=50.0, description="X position of first hex center")
    origin_y: float = Field(default=50.0, description="Y position of first hex center")
    row_offset: OffsetParity = Field(
        default=OffsetParity.ODD, description="Shifted rows for pointy-top grids"
    )
    col_offset: OffsetParity = Field(
        default=OffsetParity.ODD, description="Shifted columns for flat-top grids"
    )
    cols: int = Field(default=10, ge=0, description="Number of columns")
    rows: int = Field(default=10, ge=0, description="Number of rows")
    start_col: int = Field(default=1, description="First column index")
    start_row: int = Field(default=1, description="First row index")
    col_spacing: Optional[float] = Field(
        default=None, gt=0, description="Override calculated column spacing"
    )
    row_spacing: Optional[float] = Field(
        default=None, gt=0, description="Override calculated row spacing"
    )

    @property
    def is_pointy(self) -> bool:
        return self.orientation == Orientation.POINTY_TOP

    @property
    def parity(self) -> OffsetParity:
        """Offset parity relevant to the orientation."""
        return self.row_offset if self.is_pointy else self.col_offset


def coord_to_key(coord: AxialCoord) -> str:
    """String key for a coordinate, e.g. ``"3,-1"``."""
    return f"{coord[0]},{coord[1]}"


def key_to_coord(key: str) -> AxialCoord:
    """Parse a string key produced by ``coord_to_key``."""
    q, r = key.split(",")
    return AxialCoord(int(q), int(r))


# ============================================
# Offset <-> axial
# ============================================


def _offset_shift(index: int, parity: OffsetParity) -> int:
    if parity == OffsetParity.ODD:
        return index // 2
    return (index + 1) // 2


def offset_to_axial(col: int, row: int, config: GridConfig) -> AxialCoord:
    """Convert offset coordinates to axial coordinates."""
    if config.is_pointy:
        # Pointy-top: rows are offset
        return AxialCoord(col - _offset_shift(row, config.row_offset), row)
    # Flat-top: columns are offset
    return AxialCoord(col, row - _offset_shift(col, config.col_offset))


def axial_to_offset(coord: AxialCoord, config: GridConfig) -> OffsetCoord:
    """Convert axial coordinates to offset coordinates."""
    q, r = coord
    if config.is_pointy:
        return OffsetCoord(q + _offset_shift(r, config.row_offset), r)
    return OffsetCoord(q, r + _offset_shift(q, config.col_offset))


def get_display_coord(coord: AxialCoord, config: GridConfig) -> str:
    """Human-readable coordinate string in CCRR format."""
    col, row = axial_to_offset(coord, config)
    return f"{col:02d}{row:02d}"


def parse_display_coord(display: str, config: GridConfig) -> Optional[AxialCoord]:
    """Parse a CCRR display coordinate back to axial, or None if malformed."""
    if len(display) != 4 or not display.isdigit():
        return None
    return offset_to_axial(int(display[:2]), int(display[2:]), config)


# ============================================
# Pixel conversions
# ============================================


def get_hex_dimensions(config: GridConfig) -> Tuple[float, float]:
    """Width and height of a single hex."""
    size = config.hex_size
    if config.is_pointy:
        return size * SQRT3, size * 2
    return size * 2, size * SQRT3


def get_hex_spacing(config: GridConfig) -> Tuple[float, float]:
    """Horizontal and vertical spacing between hex centers."""
    width, height = get_hex_dimensions(config)
    if config.is_pointy:
        default_h, default_v = width, height * 0.75
    else:
        default_h, default_v = width * 0.75, height

    horiz = config.col_spacing if config.col_spacing is not None else default_h
    vert = config.row_spacing if config.row_spacing is not None else default_v
    return horiz, vert


def offset_to_pixel(col: int, row: int, config: GridConfig) -> PixelPoint:
    """Convert offset coordinates to the pixel position of the hex center."""
    horiz, vert = get_hex_spacing(config)

    if config.is_pointy:
        if config.row_offset == OffsetParity.ODD:
            shifted = row % 2 == 1
        else:
            shifted = row % 2 == 0
        x = config.origin_x + (col - config.start_col) * horiz
        x += horiz / 2 if shifted else 0
        y = config.origin_y + (row - config.start_row) * vert
    else:
        if config.col_offset == OffsetParity.ODD:
            shifted = col % 2 == 1
        else:
            shifted = col % 2 == 0
        x = config.origin_x + (col - config.start_col) * horiz
        y = config.origin_y + (row - config.start_row) * vert
        y += vert / 2 if shifted else 0

    return PixelPoint(x, y)


def hex_to_pixel(coord: AxialCoord, config: GridConfig) -> PixelPoint:
    """Convert axial coordinates to the pixel position of the hex center."""
    col, row = axial_to_offset(coord, config)
    return offset_to_pixel(col, row, config)


def axial_round(q: float, r: float) -> AxialCoord:
    """Round fractional axial coordinates to the nearest hex."""
    s = -q - r

    rq = round(q)
    rr = round(r)
    rs = round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs

    return AxialCoord(int(rq), int(rr))


def pixel_to_hex(x: float, y: float, config: GridConfig) -> AxialCoord:
    """
    Convert a pixel position to the nearest hex.

    Inverts ``hex_to_pixel`` exactly (origin, start col/row, spacing overrides
    and parity) into fractional axial coordinates, then applies cube rounding.
    """
    horiz, vert = get_hex_spacing(config)
    even_shift = 0.5 if config.parity == OffsetParity.EVEN else 0.0

    if config.is_pointy:
        r = (y - config.origin_y) / vert + config.start_row
        q = (x - config.origin_x) / horiz + config.start_col - r / 2 - even_shift
    else:
        q = (x - config.origin_x) / horiz + config.start_col
        r = (y - config.origin_y) / vert + config.start_row - q / 2 - even_shift

    return axial_round(q, r)


def hexes_to_pixels(coords: Sequence[AxialCoord], config: GridConfig) -> np.ndarray:
    """Pixel centers for many hexes as an (n, 2) array."""
    if not coords:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([hex_to_pixel(c, config) for c in coords], dtype=np.float64)


# ============================================
# Hex polygon geometry
# ============================================


def get_hex_corners(center: PixelPoint, config: GridConfig) -> np.ndarray:
    """
    Vertices of a hex as a (6, 2) array.

    Pointy-top hexes start at the top vertex (-90 degrees), flat-top hexes at
    the right vertex (0 degrees).
    """
    start = -math.pi / 2 if config.is_pointy else 0.0
    angles = np.pi / 3 * np.arange(6) + start
    xs = center[0] + config.hex_size * np.cos(angles)
    ys = center[1] + config.hex_size * np.sin(angles)
    return np.column_stack((xs, ys))


def get_hex_points(cx: float, cy: float, config: GridConfig) -> str:
    """Polygon points string ("x,y x,y ...") for SVG."""
    corners = get_hex_corners(PixelPoint(cx, cy), config)
    return " ".join(f"{x},{y}" for x, y in corners.tolist())


# ============================================
# Neighbors, distance, traversal
# ============================================

# Axial direction vectors (same for both orientations)
AXIAL_DIRECTIONS: Tuple[AxialCoord, ...] = (
    AxialCoord(1, 0),
    AxialCoord(1, -1),
    AxialCoord(0, -1),
    AxialCoord(-1, 0),
    AxialCoord(-1, 1),
    AxialCoord(0, 1),
)

# E, SE, SW, W, NW, NE
CLOCKWISE_DIRECTIONS: Tuple[AxialCoord, ...] = (
    AxialCoord(1, 0),
    AxialCoord(0, 1),
    AxialCoord(-1, 1),
    AxialCoord(-1, 0),
    AxialCoord(0, -1),
    AxialCoord(1, -1),
)


def get_neighbors(coord: AxialCoord) -> List[AxialCoord]:
    """The 6 neighboring coordinates, always in the same order."""
    q, r = coord
    return [AxialCoord(q + dq, r + dr) for dq, dr in AXIAL_DIRECTIONS]


def hex_distance(a: AxialCoord, b: AxialCoord) -> int:
    """Hex (cube) distance between two coordinates."""
    dq = a[0] - b[0]
    dr = a[1] - b[1]
    return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


def generate_ring_coords(center: AxialCoord, radius: int) -> List[AxialCoord]:
    """
    Cells at exactly ``radius`` from center.

    The walk starts ``radius`` steps east of center and proceeds clockwise
    (SW, W, NW, NE, E, SE legs).
    """
    if radius < 0:
        raise ValueError(f"Ring radius must be non-negative, got {radius}")
    if radius == 0:
        return [AxialCoord(*center)]

    ring: List[AxialCoord] = []
    q, r = center[0] + radius, center[1]
    for side in range(6):
        dq, dr = CLOCKWISE_DIRECTIONS[(side + 2) % 6]
        for _ in range(radius):
            ring.append(AxialCoord(q, r))
            q += dq
            r += dr
    return ring


def generate_spiral_coords(center: AxialCoord, radius: int) -> List[AxialCoord]:
    """
    Spiral traversal of the disc around ``center``.

    Returns center first, then ring 1, ring 2, ... up to ``radius``. Every
    cell within ``radius`` appears exactly once and ring n holds 6n cells, so
    a cell's closer neighbors always come before it.
    """
    if radius < 0:
        raise ValueError(f"Spiral radius must be non-negative, got {radius}")
    coords = [AxialCoord(*center)]
    for ring in range(1, radius + 1):
        coords.extend(generate_ring_coords(center, ring))
    return coords


def ring_position(center: AxialCoord, coord: AxialCoord) -> Tuple[int, int]:
    """(ring, index within the ring walk of generate_ring_coords) of ``coord``."""
    radius = hex_distance(center, coord)
    if radius == 0:
        return 0, 0

    q, r = center[0] + radius, center[1]
    for side in range(5):
        dq, dr = CLOCKWISE_DIRECTIONS[(side + 2) % 6]
        step = max(abs(coord[0] - q), abs(coord[1] - r))
        if step < radius and (coord[0], coord[1]) == (q + dq * step, r + dr * step):
            return radius, side * radius + step
        q += dq * radius
        r += dr * radius
    # Last leg runs back to the start
    return radius, 5 * radius + max(abs(coord[0] - q), abs(coord[1] - r))


def spiral_order(center: AxialCoord, coords: Iterable[AxialCoord]) -> List[AxialCoord]:
    """Reorder ``coords`` into spiral order around ``center``. Duplicates collapse."""
    center = AxialCoord(*center)
    wanted = {AxialCoord(*c) for c in coords}
    return sorted(wanted, key=lambda c: ring_position(center, c))


# ============================================
# Grid generation and viewport
# ============================================


def generate_grid_coords(config: GridConfig) -> List[AxialCoord]:
    """All axial coordinates of the rectangular grid, row by row."""
    return [
        offset_to_axial(col, row, config)
        for row in range(config.start_row, config.start_row + config.rows)
        for col in range(config.start_col, config.start_col + config.cols)
    ]


def calculate_view_box(
    coords: Sequence[AxialCoord], config: GridConfig, padding: float = 20
) -> ViewBox:
    """Bounding box covering every hex in ``coords`` plus padding."""
    if not coords:
        return ViewBox(0, 0, 400, 400)

    hex_width, hex_height = get_hex_dimensions(config)
    centers = hexes_to_pixels(coords, config)

    min_x = float(np.min(centers[:, 0])) - hex_width / 2
    max_x = float(np.max(centers[:, 0])) + hex_width / 2
    min_y = float(np.min(centers[:, 1])) - hex_height / 2
    max_y = float(np.max(centers[:, 1])) + hex_height / 2

    return ViewBox(
        min_x=min_x - padding,
        min_y=min_y - padding,
        width=max_x - min_x + padding * 2,
        height=max_y - min_y + padding * 2,
    )
