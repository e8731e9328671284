"""发布时间解析"""
from datetime import datetime, timezone
from typing import Any, Optional
from dateutil import parser as date_parser
from dateutil.tz import tzoffset

# RFC-822 允许的时区缩写（dateutil 默认只认识 UTC/GMT）
_TZ_OFFSETS = {
    "UT": 0,
    "UTC": 0,
    "GMT": 0,
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
    "JST": 9 * 3600,
}
_TZINFOS = {name: tzoffset(name, seconds) for name, seconds in _TZ_OFFSETS.items()}

# 无法解析的时间排在最后
OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def parse_pub_date(value: Any) -> Optional[datetime]:
    """将 ISO-8601 / RFC-822 字符串或时间戳转为带时区的 datetime，失败返回 None"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    s = str(value).strip()
    if not s:
        return None
    if s.isdigit():
        try:
            return datetime.fromtimestamp(int(s), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    try:
        dt = date_parser.parse(s, tzinfos=_TZINFOS)
    except (ValueError, OverflowError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def pub_date_sort_key(value: Any) -> datetime:
    """排序键：解析失败或为空时返回 OLDEST"""
    return parse_pub_date(value) or OLDEST
