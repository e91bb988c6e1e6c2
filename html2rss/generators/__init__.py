"""
生成器模块
"""

from .item_generator import ItemConfig, ItemGenerator, load_config, process_html_content

__all__ = [
    'ItemConfig',
    'ItemGenerator',
    'load_config',
    'process_html_content',
]
