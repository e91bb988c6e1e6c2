"""
URL解析模块
把相对引用 (src/href/srcset) 转换为绝对URL
"""

import logging
import re
from enum import Enum
from pathlib import PurePath
from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

from ..exceptions import InvalidUrl

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:')


class ReferenceKind(Enum):
    """引用类型"""
    ABSOLUTE = 'absolute'
    EMPTY = 'empty'
    ROOT_RELATIVE = 'root_relative'
    PARENT_RELATIVE = 'parent_relative'
    PLAIN_RELATIVE = 'plain_relative'


def classify_reference(reference: str) -> ReferenceKind:
    """
    判断引用的类型

    Args:
        reference: 属性值中的引用

    Returns:
        ReferenceKind
    """
    if _SCHEME_RE.match(reference):
        return ReferenceKind.ABSOLUTE
    if not reference:
        return ReferenceKind.EMPTY
    if reference.startswith('/'):
        return ReferenceKind.ROOT_RELATIVE
    if reference.startswith('..'):
        return ReferenceKind.PARENT_RELATIVE
    return ReferenceKind.PLAIN_RELATIVE


def _split_url(url: str) -> SplitResult:
    """解析绝对URL，必须包含 scheme 和 host"""
    try:
        parts = urlsplit(url)
        # 访问 port 会校验端口号
        parts.port
    except ValueError as e:
        raise InvalidUrl(f"无法解析URL: {url!r} ({e})") from e

    if not parts.scheme or not parts.netloc:
        raise InvalidUrl(f"URL缺少协议或主机: {url!r}")
    return parts


def _check_reference(reference: str):
    try:
        urlsplit(reference)
    except ValueError as e:
        raise InvalidUrl(f"无法解析引用: {reference!r} ({e})") from e


def ensure_trailing_slash(base_url: str) -> str:
    """
    规范化基础URL，保证路径以 / 结尾

    Args:
        base_url: 基础URL

    Returns:
        规范化后的URL
    """
    parts = _split_url(base_url)
    path = parts.path if parts.path.endswith('/') else parts.path + '/'
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def _directory_url(parts: SplitResult, segments) -> str:
    path = '/' + ''.join(f"{segment}/" for segment in segments)
    return urlunsplit((parts.scheme, parts.netloc, path, '', ''))


def resolve_url(base_url: str, reference: str) -> str:
    """
    将引用解析为绝对URL

    规则按优先级:
    1. 绝对URL 原样返回
    2. 空引用 返回带斜杠的基础URL
    3. / 开头 只拼接到 scheme + host
    4. .. 开头 按目录逐级回退，回退到根目录后不再继续
    5. 其他 如果基础路径最后一段与引用第一段相同，先去掉这一段再拼接，
       避免出现 .../blog/blog/page.html

    Args:
        base_url: 基础URL
        reference: 相对或绝对引用

    Returns:
        绝对URL

    Raises:
        InvalidUrl: 基础URL或引用无法解析
    """
    kind = classify_reference(reference)

    if kind is ReferenceKind.ABSOLUTE:
        _check_reference(reference)
        return reference

    if kind is ReferenceKind.EMPTY:
        return ensure_trailing_slash(base_url)

    _check_reference(reference)
    parts = _split_url(base_url)
    segments = [segment for segment in parts.path.split('/') if segment]

    if kind is ReferenceKind.ROOT_RELATIVE:
        return urljoin(_directory_url(parts, []), reference)

    if kind is ReferenceKind.PLAIN_RELATIVE and segments:
        relative = reference
        while relative.startswith('./'):
            relative = relative[2:]
        first_segment = re.split(r'[/?#]', relative, maxsplit=1)[0]
        if segments[-1] == first_segment:
            logger.debug(f"基础URL末段与引用首段重叠，去掉重复的 {first_segment!r}")
            segments = segments[:-1]

    return urljoin(_directory_url(parts, segments), reference)


def strip_last_segment(url: str) -> str:
    """
    去掉URL路径中的最后一段（文件或目录）

    Args:
        url: 绝对URL

    Returns:
        以 / 结尾的上级目录URL；路径为空或为 / 时原样返回

    Raises:
        InvalidUrl: URL无法解析
    """
    parts = _split_url(url)
    path = parts.path

    if not path or path == '/':
        return urlunsplit((parts.scheme, parts.netloc, '/', parts.query, parts.fragment))

    trimmed = path[:-1] if path.endswith('/') else path
    new_path = trimmed[:trimmed.rfind('/') + 1] or '/'
    return urlunsplit((parts.scheme, parts.netloc, new_path, parts.query, parts.fragment))


def build_item_link(base_url: str, html_source: str) -> str:
    """
    生成 RSS 条目的 link（同时作为 guid）

    远程页面直接使用其URL；本地文件路径拼接到基础URL的上级目录

    Args:
        base_url: 基础URL
        html_source: HTML文件路径或URL

    Returns:
        条目的绝对URL
    """
    if html_source.startswith(('http://', 'https://')):
        return html_source

    relative_path = PurePath(html_source).as_posix()
    return resolve_url(strip_last_segment(base_url), relative_path)
