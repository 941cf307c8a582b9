from enum import StrEnum


class OutputFormat(StrEnum):
    COMPACT = "compact"
    PRETTY = "pretty"
