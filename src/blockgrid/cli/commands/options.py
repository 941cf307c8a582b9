from dataclasses import replace
from typing import Annotated, Optional

import typer

from blockgrid.derive.layout import LayoutConfiguration
from blockgrid.utilities.env import Configuration

LedsPerEdgeOption = Annotated[
    Optional[int],
    typer.Option("--leds-per-edge", help="LEDs on each block edge."),
]
EdgeDistanceOption = Annotated[
    Optional[float],
    typer.Option("--edge-distance", help="Edge offset from the block center."),
]
BlockSizeOption = Annotated[
    Optional[float],
    typer.Option("--block-size", help="Scene-space size of one block."),
]
ColumnsOption = Annotated[
    Optional[int],
    typer.Option("--columns", help="Blocks along the grid x axis."),
]
RowsOption = Annotated[
    Optional[int],
    typer.Option("--rows", help="Blocks along the grid y axis."),
]


def resolve_layout_configuration(
    *,
    leds_per_edge: Optional[int] = None,
    edge_distance: Optional[float] = None,
    block_size: Optional[float] = None,
    columns: Optional[int] = None,
    rows: Optional[int] = None,
) -> LayoutConfiguration:
    """Merge command line overrides onto the environment configuration."""

    overrides = {
        name: value
        for name, value in (
            ("leds_per_edge", leds_per_edge),
            ("edge_distance", edge_distance),
            ("block_size", block_size),
            ("columns", columns),
            ("rows", rows),
        )
        if value is not None
    }
    config = replace(Configuration.layout_configuration(), **overrides)
    config.validate()
    return config
