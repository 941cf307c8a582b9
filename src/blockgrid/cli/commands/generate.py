import sys
from typing import Annotated, Optional

import typer

from blockgrid.cli.commands.options import (BlockSizeOption, ColumnsOption,
                                            EdgeDistanceOption,
                                            LedsPerEdgeOption, RowsOption,
                                            resolve_layout_configuration)
from blockgrid.derive.layout import build_layout
from blockgrid.derive.serialize import write_layout
from blockgrid.utilities.env import Configuration, OutputFormat
from blockgrid.utilities.logging import get_logger

logger = get_logger(__name__)

PRETTY_INDENT = 2


def generate_command(
    leds_per_edge: LedsPerEdgeOption = None,
    edge_distance: EdgeDistanceOption = None,
    block_size: BlockSizeOption = None,
    columns: ColumnsOption = None,
    rows: RowsOption = None,
    output_format: Annotated[
        Optional[OutputFormat],
        typer.Option("--format", help="Single-line or indented JSON."),
    ] = None,
) -> None:
    """Print the LED layout as a JSON array."""

    try:
        config = resolve_layout_configuration(
            leds_per_edge=leds_per_edge,
            edge_distance=edge_distance,
            block_size=block_size,
            columns=columns,
            rows=rows,
        )
        output_format = output_format or Configuration.output_format()
    except ValueError as exc:
        logger.error("Invalid layout configuration: %s", exc)
        raise typer.Exit(code=1)

    layout = build_layout(config)
    indent = PRETTY_INDENT if output_format == OutputFormat.PRETTY else None
    write_layout(layout, sys.stdout, indent=indent)
