"""
RSS条目生成器主模块
负责协调各模块: 读取HTML -> 提取内容 -> 重写地址 -> 压缩空白 -> 写入RSS
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

from ..core.attribute_rewriter import AttributeRewriter
from ..core.content_extractor import DEFAULT_SELECTOR, ContentExtractor, ExtractedContent
from ..core.date_normalizer import NOW, normalize_date
from ..core.url_resolver import build_item_link
from ..exceptions import IoFailure
from ..fetchers.web_fetcher import WebFetcher
from ..formatters.feed_item_formatter import FeedItem
from ..formatters.feed_writer import FeedWriter
from ..utils import compact_whitespace, truncate_text

logger = logging.getLogger(__name__)


@dataclass
class ItemConfig:
    """一次运行的全部配置"""
    html: str
    rss: str
    base_url: str
    selector: str = DEFAULT_SELECTOR
    title: Optional[str] = None
    date_time: str = NOW
    lines_to_cut: int = 0
    dry_run: bool = False
    timeout: int = 15
    retries: int = 0
    user_agent: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ItemConfig':
        """
        从字典创建配置，忽略未知的键

        Args:
            data: 配置字典

        Returns:
            ItemConfig
        """
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


def load_config(config_path: str) -> Dict[str, Any]:
    """
    加载 YAML 配置文件并展开为扁平字典

    文件中的 item 和 fetch 两个段落会合并到同一层

    Args:
        config_path: 配置文件路径

    Returns:
        配置字典
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise IoFailure(f"加载配置文件失败: {config_path}, 错误: {e}") from e
    logger.info(f"配置文件加载成功: {config_path}")

    flat: Dict[str, Any] = {}
    flat.update(config.get('item', {}) or {})
    flat.update(config.get('fetch', {}) or {})
    return flat


def process_html_content(
    html_content: str,
    base_url: str,
    selector: str = DEFAULT_SELECTOR,
    title: Optional[str] = None,
    lines_to_cut: int = 0,
) -> ExtractedContent:
    """
    处理HTML，得到条目的标题和内容

    Args:
        html_content: 完整的HTML文档
        base_url: 解析相对地址使用的基础URL
        selector: CSS选择器
        title: 指定标题
        lines_to_cut: 从内容开头删除的行数

    Returns:
        ExtractedContent，markup 中的地址都已是绝对URL
    """
    extracted = ContentExtractor(selector, lines_to_cut, title).extract(html_content)
    markup = AttributeRewriter(base_url).rewrite(extracted.markup)
    return ExtractedContent(title=extracted.title, markup=compact_whitespace(markup))


class ItemGenerator:
    """RSS条目生成器"""

    def __init__(self, config: ItemConfig, fetcher: Optional[WebFetcher] = None):
        """
        初始化生成器

        Args:
            config: 运行配置
            fetcher: HTML读取器，为空时按配置创建
        """
        self.config = config
        self.fetcher = fetcher or WebFetcher(
            timeout=config.timeout,
            retries=config.retries,
            user_agent=config.user_agent,
        )

    def build_item(self, html_content: str) -> FeedItem:
        """
        从HTML生成条目

        Args:
            html_content: 完整的HTML文档

        Returns:
            FeedItem
        """
        config = self.config
        content = process_html_content(
            html_content,
            config.base_url,
            config.selector,
            config.title,
            config.lines_to_cut,
        )
        pub_date = normalize_date(config.date_time)
        link = build_item_link(config.base_url, config.html)

        return FeedItem.build(
            title=content.title,
            description=content.markup,
            link=link,
            pub_date=pub_date,
        )

    def print_dry_run(self, item: FeedItem):
        """
        打印 dry-run 结果到控制台

        Args:
            item: RSS条目
        """
        config = self.config
        print("=== DRY RUN MODE ===")
        print(f"Title: {item.title}")
        print(f"Base URL: {config.base_url}")
        print(f"Selector used: {config.selector}")
        if config.lines_to_cut > 0:
            print(f"Lines to cut: {config.lines_to_cut}")
        if config.title is not None:
            print(f"Title override: {config.title}")
        print(f"Description preview: {truncate_text(item.description, 200)}")
        print("RSS Item:")
        print(item.to_xml())

    def generate(self) -> FeedItem:
        """
        执行完整流程

        所有错误都会在写入 RSS 文件之前抛出

        Returns:
            生成的 FeedItem
        """
        config = self.config
        html_content = self.fetcher.load(config.html)
        item = self.build_item(html_content)
        logger.info(f"已生成条目: {item.title} ({item.link})")

        if config.dry_run:
            logger.info("Dry-run模式，不写入RSS文件")
            self.print_dry_run(item)
            return item

        FeedWriter(config.rss).add_item(item)
        return item
