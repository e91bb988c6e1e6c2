"""
属性重写模块
把 src / href / srcset 中的相对地址替换为绝对URL
"""

import logging
import re

from .url_resolver import ReferenceKind, classify_reference, resolve_url
from ..exceptions import InvalidUrl

logger = logging.getLogger(__name__)

# 只处理双引号属性值，且不匹配 data-src 这类属性名的后缀
ATTRIBUTE_RE = re.compile(r'(?<![\w-])(srcset|src|href)(\s*=\s*)"([^"]*)"')


class AttributeRewriter:
    """相对地址重写器"""

    def __init__(self, base_url: str):
        """
        Args:
            base_url: 解析相对地址使用的基础URL
        """
        self.base_url = base_url

    def _resolve(self, value: str) -> str:
        if classify_reference(value) is ReferenceKind.ABSOLUTE:
            return value
        try:
            return resolve_url(self.base_url, value)
        except InvalidUrl as e:
            logger.warning(f"无法解析地址，保留原值: {value!r}, 错误: {e}")
            return value

    def _rewrite_srcset(self, value: str) -> str:
        candidates = []
        for candidate in value.split(','):
            candidate = candidate.strip()
            if not candidate:
                continue
            parts = candidate.split(None, 1)
            url = self._resolve(parts[0])
            candidates.append(f"{url} {parts[1]}" if len(parts) > 1 else url)
        return ', '.join(candidates)

    def _replace(self, match: re.Match) -> str:
        name, separator, value = match.groups()
        if name == 'srcset':
            new_value = self._rewrite_srcset(value)
        else:
            new_value = self._resolve(value)
        return f'{name}{separator}"{new_value}"'

    def rewrite(self, markup: str) -> str:
        """
        重写 markup 中所有 src / href / srcset 属性

        Args:
            markup: HTML片段

        Returns:
            相对地址全部替换为绝对URL后的HTML
        """
        return ATTRIBUTE_RE.sub(self._replace, markup)
