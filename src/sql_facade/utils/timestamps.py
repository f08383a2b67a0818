"""
Timestamp formatting for literal embedding.

Date-time values are not bindable as-is; render them to text first.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import ValidationError

from sql_facade.config import get_settings
from sql_facade.config.settings import DEFAULT_TIMESTAMP_FORMAT


def _default_format() -> str:
    try:
        return get_settings().timestamp_format
    except ValidationError:
        return DEFAULT_TIMESTAMP_FORMAT


def format_timestamp(value: Union[datetime, int, float], fmt: Optional[str] = None) -> str:
    """
    Render a datetime, or epoch milliseconds, as text.

    Epoch milliseconds are interpreted in local time, keeping the
    seconds part.

    Args:
        value: datetime or milliseconds since the epoch
        fmt: strftime format; defaults to the configured timestamp_format

    Examples:
        >>> format_timestamp(datetime(2017, 2, 21, 9, 14, 42))
        '2017-02-21 09:14:42'
        >>> format_timestamp(datetime(2017, 2, 21), "%Y/%m/%d")
        '2017/02/21'
    """
    if isinstance(value, bool):
        raise TypeError("expected datetime or epoch milliseconds, got bool")
    if isinstance(value, (int, float)):
        value = datetime.fromtimestamp(value / 1000)
    return value.strftime(fmt or _default_format())
