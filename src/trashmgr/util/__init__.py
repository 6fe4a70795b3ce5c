from .paths import (
    TRASH_INFO_EXT,
    TRASH_INFO_SUFFIX,
    check_extension,
    with_trash_info_ext,
)
from .percent import is_single_line_value, percent_decode, percent_encode
from .time import (
    TRASH_DATETIME_FORMAT,
    format_trash_datetime,
    now_local,
    parse_trash_datetime,
)

__all__ = [
    "TRASH_INFO_EXT",
    "TRASH_INFO_SUFFIX",
    "check_extension",
    "with_trash_info_ext",
    "percent_encode",
    "percent_decode",
    "is_single_line_value",
    "TRASH_DATETIME_FORMAT",
    "now_local",
    "format_trash_datetime",
    "parse_trash_datetime",
]
