"""
数据抓取模块
负责读取本地或远程的HTML
"""

from .web_fetcher import WebFetcher, is_remote_source

__all__ = [
    'WebFetcher',
    'is_remote_source',
]
