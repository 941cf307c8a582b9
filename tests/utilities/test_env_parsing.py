"""Readers behind the ``BLOCKGRID_*`` layout variables."""

from __future__ import annotations

import pytest

from blockgrid.utilities.env.parsing import _env_flag, _env_float, _env_int


class TestLayoutVariableReaders:
    """Exercise the readers with the bounds the reference window relies on."""

    def test_unset_variables_fall_back_to_reference_window(self) -> None:
        """Confirm unset variables yield 10 LEDs at 0.75 so bare runs emit the 1x1 window."""
        assert _env_int("BLOCKGRID_LEDS_PER_EDGE", default=10, minimum=1) == 10
        assert (
            _env_float(
                "BLOCKGRID_EDGE_DISTANCE", default=0.75, greater_than=0.0, at_most=1.0
            )
            == 0.75
        )

    def test_leds_per_edge_accepts_padded_integer(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Confirm surrounding whitespace is ignored so shell-quoted values still parse."""
        monkeypatch.setenv("BLOCKGRID_LEDS_PER_EDGE", " 12 ")

        assert _env_int("BLOCKGRID_LEDS_PER_EDGE", default=10, minimum=1) == 12

    @pytest.mark.parametrize(
        ("value", "message"),
        [
            pytest.param("0", "at least 1", id="empty_strip"),
            pytest.param("2.5", "an integer", id="fractional_count"),
            pytest.param("ten", "an integer", id="word"),
        ],
    )
    def test_leds_per_edge_rejects_unusable_counts(
        self, monkeypatch: pytest.MonkeyPatch, value: str, message: str
    ) -> None:
        """Confirm bad counts name BLOCKGRID_LEDS_PER_EDGE so the operator knows what to fix."""
        monkeypatch.setenv("BLOCKGRID_LEDS_PER_EDGE", value)

        with pytest.raises(ValueError, match=f"BLOCKGRID_LEDS_PER_EDGE must be {message}"):
            _env_int("BLOCKGRID_LEDS_PER_EDGE", default=10, minimum=1)

    def test_edge_distance_accepts_block_boundary(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Confirm the inclusive upper bound so strips may sit on the block outline."""
        monkeypatch.setenv("BLOCKGRID_EDGE_DISTANCE", "1")

        assert (
            _env_float(
                "BLOCKGRID_EDGE_DISTANCE", default=0.75, greater_than=0.0, at_most=1.0
            )
            == 1.0
        )

    @pytest.mark.parametrize(
        ("value", "message"),
        [
            pytest.param("0", "greater than 0.0", id="collapsed_to_center"),
            pytest.param("-0.5", "greater than 0.0", id="negative"),
            pytest.param("1.01", "at most 1.0", id="outside_block"),
            pytest.param("nan", "finite", id="nan"),
            pytest.param("inf", "finite", id="infinite"),
            pytest.param("far", "a number", id="word"),
        ],
    )
    def test_edge_distance_rejects_out_of_frame_values(
        self, monkeypatch: pytest.MonkeyPatch, value: str, message: str
    ) -> None:
        """Confirm distances outside (0, 1] fail with the variable name before any layout is built."""
        monkeypatch.setenv("BLOCKGRID_EDGE_DISTANCE", value)

        with pytest.raises(ValueError, match=f"BLOCKGRID_EDGE_DISTANCE must be {message}"):
            _env_float(
                "BLOCKGRID_EDGE_DISTANCE", default=0.75, greater_than=0.0, at_most=1.0
            )

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("0", False), ("off", False), ("no", False), ("1", True), (" On ", True)],
    )
    def test_log_to_file_flag(
        self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
    ) -> None:
        """Confirm BLOCKGRID_LOG_TO_FILE toggles so CI runs can keep logs off disk."""
        monkeypatch.setenv("BLOCKGRID_LOG_TO_FILE", value)

        assert _env_flag("BLOCKGRID_LOG_TO_FILE", default=True) is expected
