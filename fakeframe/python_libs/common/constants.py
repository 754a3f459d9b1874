"""Constants for the generation engine."""

from enum import StrEnum


class TypeFamily(StrEnum):
    """Families of column types that can be switched on or off as a group."""

    CORE = "core"
    DECIMAL = "decimal"
    BIGDECIMAL = "bigdecimal"
    DATETIME = "datetime"
    UUID = "uuid"
    COLOR = "color"
    HTTP = "http"


class ArgumentProfile(StrEnum):
    """Shape of the arguments a column type reads."""

    NONE = "none"
    SCALAR = "scalar"
    RANGE = "range"
    TIMESTAMP = "timestamp"
    TIMESTAMP_RANGE = "timestamp_range"


class FileFormat(StrEnum):
    """Supported table file formats."""

    PARQUET = "parquet"
    JSON = "json"
    CSV = "csv"


DEFAULT_LOCALE = "en_US"
LICENCE_PLATE_LOCALE = "fr_FR"

DEFAULT_ROW_COUNT = 10000
DEFAULT_NUM_THREADS = 1
DEFAULT_CHUNK_SIZE = 4096

MAX_SMALL_UINT = 255
