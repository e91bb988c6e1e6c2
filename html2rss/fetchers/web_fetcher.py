"""
网页抓取模块
负责从本地文件或远程网页读取HTML
"""

import logging
from typing import Optional

import requests

from ..exceptions import IoFailure
from ..utils import create_retry_session

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)


def is_remote_source(source: str) -> bool:
    """判断来源是否是 http(s) URL"""
    return source.startswith(('http://', 'https://'))


class WebFetcher:
    """HTML读取器"""

    def __init__(self, timeout: int = 15, retries: int = 0,
                 user_agent: Optional[str] = None):
        """
        初始化HTML读取器

        Args:
            timeout: 请求超时时间（秒）
            retries: 失败重试次数，默认只请求一次
            user_agent: 自定义 User-Agent
        """
        self.timeout = timeout
        self.session = create_retry_session(total_retries=retries, backoff_factor=0.8)
        self.session.headers.update({
            'User-Agent': user_agent or DEFAULT_USER_AGENT,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        })

    def fetch_url(self, url: str) -> str:
        """
        抓取远程网页

        Args:
            url: 网页 URL

        Returns:
            HTML文本

        Raises:
            IoFailure: 请求失败或返回错误状态码
        """
        try:
            logger.info(f"正在抓取网页内容: {url}")
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise IoFailure(f"抓取网页失败: {url}, 错误: {e}") from e

        # 处理编码
        if response.encoding == 'ISO-8859-1':
            response.encoding = response.apparent_encoding

        return response.text

    def read_file(self, path: str) -> str:
        """
        读取本地HTML文件

        Args:
            path: 文件路径

        Returns:
            HTML文本

        Raises:
            IoFailure: 文件无法读取
        """
        try:
            logger.info(f"正在读取本地文件: {path}")
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except OSError as e:
            raise IoFailure(f"读取HTML文件失败: {path}, 错误: {e}") from e

    def load(self, source: str) -> str:
        """
        根据来源类型读取HTML

        Args:
            source: 本地路径或 http(s) URL

        Returns:
            HTML文本
        """
        if is_remote_source(source):
            return self.fetch_url(source)
        return self.read_file(source)
