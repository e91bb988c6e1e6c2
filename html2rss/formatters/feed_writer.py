"""
RSS文件写入模块
把新条目插入到 rss.xml 中第一个 </channel> 之前
"""

import logging
from pathlib import Path

from .feed_item_formatter import FeedItem
from ..exceptions import IoFailure
from ..utils import insert_before_marker

logger = logging.getLogger(__name__)

CHANNEL_END = '</channel>'


class FeedWriter:
    """RSS文件写入器"""

    def __init__(self, rss_path: str):
        """
        初始化写入器

        Args:
            rss_path: rss.xml 文件路径
        """
        self.rss_path = Path(rss_path)

    def _read(self) -> str:
        try:
            with open(self.rss_path, 'r', encoding='utf-8') as f:
                return f.read()
        except OSError as e:
            raise IoFailure(f"读取RSS文件失败: {self.rss_path}, 错误: {e}") from e

    def _write(self, content: str):
        try:
            with open(self.rss_path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            raise IoFailure(f"写入RSS文件失败: {self.rss_path}, 错误: {e}") from e

    def add_item(self, item: FeedItem) -> str:
        """
        插入条目并保存文件

        先完整读取、再完整生成新内容，最后一次性写回；
        找不到 </channel> 时文件保持不变

        Args:
            item: RSS条目

        Returns:
            保存的文件路径

        Raises:
            MissingChannelMarker: 文件中没有 </channel>
            IoFailure: 读写失败
        """
        content = self._read()
        new_content = insert_before_marker(content, item.to_xml(), CHANNEL_END)
        self._write(new_content)

        logger.info(f"RSS条目已添加到: {self.rss_path}")
        return str(self.rss_path)
