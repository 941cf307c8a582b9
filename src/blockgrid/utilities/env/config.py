from __future__ import annotations

from typing import TYPE_CHECKING

from blockgrid.utilities.env.layout import LayoutEnvironment

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from blockgrid.derive.layout import LayoutConfiguration


class Configuration(LayoutEnvironment):
    """Aggregate environment configuration helpers."""

    @classmethod
    def layout_configuration(cls) -> LayoutConfiguration:
        from blockgrid.derive.layout import LayoutConfiguration

        return LayoutConfiguration(
            leds_per_edge=cls.leds_per_edge(),
            edge_distance=cls.edge_distance(),
            block_size=cls.block_size(),
            columns=cls.grid_columns(),
            rows=cls.grid_rows(),
        )
