"""
内容提取模块
从HTML中取出选择器对应元素的内部HTML和标题
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from ..exceptions import SelectorNotFound
from ..utils import compact_whitespace

logger = logging.getLogger(__name__)

DEFAULT_SELECTOR = 'main'
UNTITLED = 'Untitled'

# 只按换行拆分，行尾的 \r 一并去掉
_NEWLINE_RE = re.compile(r'\r?\n')


@dataclass(frozen=True)
class ExtractedContent:
    """提取结果"""
    title: str
    markup: str


def cut_lines(markup: str, lines_to_cut: int) -> str:
    """
    删除开头的若干行

    删除 min(lines_to_cut, 总行数) 行，行数不足时结果为空字符串

    Args:
        markup: HTML文本
        lines_to_cut: 要删除的行数

    Returns:
        剩余的文本
    """
    if lines_to_cut <= 0:
        return markup

    lines = _NEWLINE_RE.split(markup)
    if lines[-1] == '':
        lines.pop()
    if lines_to_cut >= len(lines):
        logger.warning(f"要删除的行数 ({lines_to_cut}) 不少于内容总行数 ({len(lines)})，内容将为空")
    return '\n'.join(lines[lines_to_cut:])


class ContentExtractor:
    """HTML内容提取器"""

    def __init__(self, selector: str = DEFAULT_SELECTOR, lines_to_cut: int = 0,
                 title: Optional[str] = None):
        """
        初始化内容提取器

        Args:
            selector: CSS选择器，只取第一个匹配的元素
            lines_to_cut: 从内容开头删除的行数
            title: 指定标题，为空时使用第一个 <h1> 的文本
        """
        self.selector = selector
        self.lines_to_cut = lines_to_cut
        self.title = title

    def _select(self, soup: BeautifulSoup):
        try:
            element = soup.select_one(self.selector)
        except SelectorSyntaxError as e:
            raise SelectorNotFound(f"无效的CSS选择器: {self.selector!r}") from e

        if element is None:
            raise SelectorNotFound(f"HTML中未找到选择器: {self.selector!r}")
        return element

    def _find_title(self, soup: BeautifulSoup) -> str:
        if self.title is not None:
            return self.title

        h1 = soup.find('h1')
        if h1 is None:
            logger.info(f"未找到 <h1>，使用默认标题 {UNTITLED!r}")
            return UNTITLED
        return compact_whitespace(h1.get_text(' '))

    def extract(self, html_content: str) -> ExtractedContent:
        """
        提取标题和内容

        Args:
            html_content: 完整的HTML文档

        Returns:
            ExtractedContent

        Raises:
            SelectorNotFound: 没有元素匹配选择器
        """
        soup = BeautifulSoup(html_content, 'html.parser')
        element = self._select(soup)

        markup = cut_lines(element.decode_contents(), self.lines_to_cut)
        title = self._find_title(soup)

        logger.debug(f"选择器 {self.selector!r} 提取了 {len(markup)} 个字符")
        return ExtractedContent(title=title, markup=markup)
