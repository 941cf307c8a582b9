from pathlib import Path
from typing import Annotated

import typer

from blockgrid.cli.commands.options import (BlockSizeOption, ColumnsOption,
                                            EdgeDistanceOption,
                                            LedsPerEdgeOption, RowsOption,
                                            resolve_layout_configuration)
from blockgrid.derive.layout import build_layout
from blockgrid.derive.preview import DEFAULT_PREVIEW_SIZE, save_preview
from blockgrid.utilities.logging import get_logger

logger = get_logger(__name__)


def preview_command(
    output: Annotated[Path, typer.Argument(help="PNG file to write.")],
    leds_per_edge: LedsPerEdgeOption = None,
    edge_distance: EdgeDistanceOption = None,
    block_size: BlockSizeOption = None,
    columns: ColumnsOption = None,
    rows: RowsOption = None,
    size: Annotated[
        int, typer.Option("--size", min=128, help="Image width and height in pixels.")
    ] = DEFAULT_PREVIEW_SIZE,
) -> None:
    """Render a top-down preview of the layout."""

    try:
        config = resolve_layout_configuration(
            leds_per_edge=leds_per_edge,
            edge_distance=edge_distance,
            block_size=block_size,
            columns=columns,
            rows=rows,
        )
    except ValueError as exc:
        logger.error("Invalid layout configuration: %s", exc)
        raise typer.Exit(code=1)

    save_preview(build_layout(config), output, size=size)
    typer.echo(f"Wrote preview to {output}")
