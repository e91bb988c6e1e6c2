"""
格式化模块
包含 RSS 条目生成和 RSS 文件写入
"""

from .feed_item_formatter import FeedItem
from .feed_writer import FeedWriter

__all__ = [
    'FeedItem',
    'FeedWriter',
]
