"""JSON encoding of LED layouts for pixel-mapping controllers."""

from __future__ import annotations

import json
from typing import Any, Sequence, TextIO

from blockgrid.derive.layout import LedDescriptor

COMPACT_SEPARATORS = (",", ":")


def descriptor_to_record(led: LedDescriptor) -> dict[str, Any]:
    return {
        "point": [float(led.point.x), float(led.point.y), float(led.point.z)],
        "gridXY": [int(led.grid_xy[0]), int(led.grid_xy[1])],
        "blockXY": [float(led.block_xy[0]), float(led.block_xy[1])],
        "blockAngle": float(led.block_angle),
    }


def layout_to_json(
    layout: Sequence[LedDescriptor],
    *,
    indent: int | None = None,
) -> str:
    """Encode ``layout`` as a JSON array, on a single line unless ``indent`` is set."""

    records = [descriptor_to_record(led) for led in layout]
    if indent is None:
        return json.dumps(records, separators=COMPACT_SEPARATORS)
    return json.dumps(records, indent=indent)


def write_layout(
    layout: Sequence[LedDescriptor],
    stream: TextIO,
    *,
    indent: int | None = None,
) -> None:
    stream.write(layout_to_json(layout, indent=indent))
    stream.write("\n")
    stream.flush()
