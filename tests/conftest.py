import os

# Module-level loggers are created at import time; keep them off the filesystem.
os.environ.setdefault("BLOCKGRID_LOG_TO_FILE", "0")

import pytest
from hypothesis import HealthCheck, settings

from blockgrid.derive.layout import LayoutConfiguration

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")

LAYOUT_ENV_VARS = (
    "BLOCKGRID_LEDS_PER_EDGE",
    "BLOCKGRID_EDGE_DISTANCE",
    "BLOCKGRID_BLOCK_SIZE",
    "BLOCKGRID_COLUMNS",
    "BLOCKGRID_ROWS",
    "BLOCKGRID_OUTPUT_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_layout_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip layout overrides so every test starts from the reference window."""

    for name in LAYOUT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def reference_config() -> LayoutConfiguration:
    return LayoutConfiguration()
