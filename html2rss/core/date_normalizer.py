"""
日期规范化模块
把各种日期字符串转换为 RSS pubDate 使用的 RFC 2822 格式
"""

import logging
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Optional

from dateutil import parser as date_parser

from ..exceptions import UnparseableDate

logger = logging.getLogger(__name__)

NOW = 'now'

# 不带时区信息的格式，按 UTC 处理
NAIVE_FORMATS = (
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d',
)


def format_rfc2822(dt: datetime) -> str:
    """
    格式化为 RFC 2822 GMT 时间，例如 Thu, 02 Jun 2022 14:30:00 GMT

    Args:
        dt: datetime对象，无时区时按 UTC 处理

    Returns:
        格式化的字符串
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)


def now_rfc2822() -> str:
    """当前时间的 RFC 2822 字符串"""
    return format_rfc2822(datetime.now(timezone.utc))


def _parse_rfc2822(value: str) -> Optional[datetime]:
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None


def _parse_rfc3339(value: str) -> Optional[datetime]:
    try:
        dt = date_parser.isoparse(value)
    except (ValueError, OverflowError):
        # 时间与时区之间带空格等宽松写法
        try:
            dt = date_parser.parse(value)
        except (ValueError, OverflowError, TypeError):
            return None
    # 只接受带时区的时间，其余交给后面的格式
    if dt.tzinfo is None:
        return None
    return dt


def _parse_naive(value: str) -> Optional[datetime]:
    for fmt in NAIVE_FORMATS:
        try:
            return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    return None


def normalize_date(value: str) -> str:
    """
    解析日期字符串并输出 RFC 2822 格式

    依次尝试: RFC 2822, 带时区的 RFC 3339, YYYY-MM-DD HH:MM:SS,
    YYYY-MM-DD HH:MM, YYYY-MM-DD。"now" 表示当前时间。

    Args:
        value: 日期字符串

    Returns:
        RFC 2822 格式的日期

    Raises:
        UnparseableDate: 无法识别的日期格式
    """
    value = value.strip()
    if value.lower() == NOW:
        return now_rfc2822()

    for parse in (_parse_rfc2822, _parse_rfc3339, _parse_naive):
        dt = parse(value)
        if dt is not None:
            logger.debug(f"日期 {value!r} 由 {parse.__name__} 解析")
            return format_rfc2822(dt)

    raise UnparseableDate(f"无法识别的日期格式: {value!r}")
