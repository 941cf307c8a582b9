import os

from blockgrid.utilities.env.enums import OutputFormat
from blockgrid.utilities.env.parsing import _env_float, _env_int


class LayoutEnvironment:
    @classmethod
    def leds_per_edge(cls) -> int:
        return _env_int("BLOCKGRID_LEDS_PER_EDGE", default=10, minimum=1)

    @classmethod
    def edge_distance(cls) -> float:
        # Distances past 1 place LEDs outside the block frame.
        return _env_float(
            "BLOCKGRID_EDGE_DISTANCE", default=0.75, greater_than=0.0, at_most=1.0
        )

    @classmethod
    def block_size(cls) -> float:
        return _env_float("BLOCKGRID_BLOCK_SIZE", default=0.3, greater_than=0.0)

    @classmethod
    def grid_columns(cls) -> int:
        return _env_int("BLOCKGRID_COLUMNS", default=1, minimum=1)

    @classmethod
    def grid_rows(cls) -> int:
        return _env_int("BLOCKGRID_ROWS", default=1, minimum=1)

    @classmethod
    def output_format(cls) -> OutputFormat:
        raw = os.environ.get("BLOCKGRID_OUTPUT_FORMAT", "compact").strip().lower()
        try:
            return OutputFormat(raw)
        except ValueError as exc:
            raise ValueError(
                "BLOCKGRID_OUTPUT_FORMAT must be 'compact' or 'pretty'"
            ) from exc
