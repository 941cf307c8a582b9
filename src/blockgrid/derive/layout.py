from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from blockgrid.errors import InvalidConfiguration
from blockgrid.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_LEDS_PER_EDGE = 10
DEFAULT_EDGE_DISTANCE = 0.75
DEFAULT_BLOCK_SIZE = 0.3
EDGES_PER_BLOCK = 4
EDGE_ANGLE_STEP = -math.pi / 2

GridXY = tuple[int, int]


@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class LedDescriptor:
    """One LED of the layout.

    ``point`` is the scene-space position used by the pre-visualizer,
    ``grid_xy`` the address of the owning block, ``block_xy`` the position in
    the block frame ([-1, 1] on both axes) and ``block_angle`` the angle in
    radians measured from the block's +Y axis.
    """

    point: Point3D
    grid_xy: GridXY
    block_xy: tuple[float, float]
    block_angle: float


@dataclass(frozen=True)
class LayoutConfiguration:
    leds_per_edge: int = DEFAULT_LEDS_PER_EDGE
    edge_distance: float = DEFAULT_EDGE_DISTANCE
    block_size: float = DEFAULT_BLOCK_SIZE
    columns: int = 1
    rows: int = 1

    @property
    def leds_per_block(self) -> int:
        return EDGES_PER_BLOCK * self.leds_per_edge

    @property
    def led_count(self) -> int:
        return self.leds_per_block * self.columns * self.rows

    @property
    def center(self) -> float:
        """Scene-space offset applied to both horizontal axes."""

        return self.block_size / 2

    def validate(self) -> None:
        if self.leds_per_edge < 1:
            raise InvalidConfiguration("leds_per_edge must be at least 1")
        if self.columns < 1 or self.rows < 1:
            raise InvalidConfiguration("grid must have at least one column and row")
        for name in ("edge_distance", "block_size"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidConfiguration(f"{name} must be a positive finite number")
        if self.edge_distance > 1:
            # Beyond the unit frame the block_xy bound no longer holds.
            raise InvalidConfiguration("edge_distance must not exceed 1")


def generate_edge(
    grid_xy: GridXY,
    angle: float,
    config: LayoutConfiguration,
) -> tuple[LedDescriptor, ...]:
    """Lay out the LED strip along one edge of the block at ``grid_xy``.

    The strip sits ``config.edge_distance`` from the block center, rotated by
    ``angle`` radians from the north edge. LEDs are spaced evenly with half a
    gap left at each end so strips on adjoining edges never meet at a corner.
    """

    count = config.leds_per_edge
    y = config.edge_distance
    spacing = 2 * y / (count + 1)
    s = math.sin(angle)
    c = math.cos(angle)

    leds = []
    for i in range(count):
        x = (i - (count - 1) / 2.0) * spacing

        rx = x * c - y * s
        ry = x * s + y * c

        leds.append(
            LedDescriptor(
                point=_project(grid_xy, rx, ry, config),
                grid_xy=grid_xy,
                block_xy=(rx, ry),
                # Arguments are (x, y) so zero points along +Y.
                block_angle=math.atan2(rx, ry),
            )
        )
    return tuple(leds)


def generate_block(
    grid_xy: GridXY,
    config: LayoutConfiguration,
) -> tuple[LedDescriptor, ...]:
    """Return the LEDs of all four edges, clockwise starting from north."""

    leds: list[LedDescriptor] = []
    for edge in range(EDGES_PER_BLOCK):
        leds.extend(generate_edge(grid_xy, edge * EDGE_ANGLE_STEP, config))
    return tuple(leds)


def iter_grid(config: LayoutConfiguration) -> Iterator[GridXY]:
    """Yield block addresses in wiring order, row by row."""

    for gy in range(config.rows):
        for gx in range(config.columns):
            yield (gx, gy)


def block_start_index(grid_xy: GridXY, config: LayoutConfiguration) -> int:
    gx, gy = grid_xy
    if not (0 <= gx < config.columns and 0 <= gy < config.rows):
        raise InvalidConfiguration(f"Block {grid_xy} lies outside the grid.")
    return (gy * config.columns + gx) * config.leds_per_block


def build_layout(
    config: LayoutConfiguration | None = None,
) -> tuple[LedDescriptor, ...]:
    config = config or LayoutConfiguration()
    config.validate()

    logger.info(
        "Building %dx%d block layout with %d LEDs",
        config.columns,
        config.rows,
        config.led_count,
    )
    leds: list[LedDescriptor] = []
    for grid_xy in iter_grid(config):
        logger.debug(
            "Block %s starts at index %d",
            grid_xy,
            block_start_index(grid_xy, config),
        )
        leds.extend(generate_block(grid_xy, config))
    return tuple(leds)


def _project(
    grid_xy: GridXY,
    rx: float,
    ry: float,
    config: LayoutConfiguration,
) -> Point3D:
    gx, gy = grid_xy
    size = config.block_size
    return Point3D(
        x=size * -(gx + rx * 0.5 + 0.5) + config.center,
        y=0.0,
        z=size * -(gy - ry * 0.5 + 0.5) + config.center,
    )
