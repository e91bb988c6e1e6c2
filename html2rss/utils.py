"""
工具函数模块
包含空白压缩、XML转义、文本插入和HTTP会话等功能
"""

import re
from typing import Optional, Tuple
from xml.sax.saxutils import escape

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .exceptions import MissingChannelMarker

_WHITESPACE_RE = re.compile(r'\s+')

# escape() 总是先处理 &，再追加引号实体
_QUOTE_ENTITIES = {'"': '&quot;', "'": '&apos;'}


def create_retry_session(
    total_retries: int = 3,
    backoff_factor: float = 0.8,
    status_forcelist: Optional[Tuple[int, ...]] = None
) -> requests.Session:
    """
    创建带重试机制的 requests Session

    Args:
        total_retries: 最大重试次数，0 表示只请求一次
        backoff_factor: 退避系数
        status_forcelist: 触发重试的状态码

    Returns:
        requests.Session
    """
    retry_codes = status_forcelist or (429, 500, 502, 503, 504)
    retry = Retry(
        total=total_retries,
        connect=total_retries,
        read=total_retries,
        status=total_retries,
        backoff_factor=backoff_factor,
        status_forcelist=retry_codes,
        allowed_methods=frozenset(["GET", "HEAD"]),
        raise_on_status=False
    )

    adapter = HTTPAdapter(max_retries=retry)
    session = requests.Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def compact_whitespace(text: str) -> str:
    """
    将连续空白压缩为单个空格并去掉首尾空白

    Args:
        text: 原始文本

    Returns:
        压缩后的文本
    """
    return _WHITESPACE_RE.sub(' ', text).strip()


def escape_xml(text: str) -> str:
    """
    转义 XML 特殊字符 (& < > " ')

    Args:
        text: 原始文本

    Returns:
        转义后的文本
    """
    return escape(text, _QUOTE_ENTITIES)


def insert_before_marker(content: str, fragment: str, marker: str = '</channel>') -> str:
    """
    在第一次出现的 marker 之前插入文本片段

    Args:
        content: 原始文本
        fragment: 要插入的片段
        marker: 定位标记

    Returns:
        插入后的完整文本

    Raises:
        MissingChannelMarker: content 中没有 marker
    """
    pos = content.find(marker)
    if pos == -1:
        raise MissingChannelMarker(f"未找到插入标记: {marker}")
    return content[:pos] + fragment + content[pos:]


def truncate_text(text: str, max_length: int = 500) -> str:
    """
    截断文本到指定长度

    Args:
        text: 原始文本
        max_length: 最大长度

    Returns:
        截断后的文本
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
