"""Environment configuration helpers."""

from blockgrid.utilities.env.config import Configuration as Configuration
from blockgrid.utilities.env.enums import OutputFormat as OutputFormat
