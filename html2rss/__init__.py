"""
html2rss 源代码包
从HTML页面提取内容并作为条目加入RSS文件
"""

from .exceptions import (
    HtmlToRssError,
    SelectorNotFound,
    InvalidUrl,
    UnparseableDate,
    MissingChannelMarker,
    IoFailure,
)
from .utils import compact_whitespace, escape_xml, insert_before_marker, create_retry_session
from .core import (
    ReferenceKind,
    classify_reference,
    resolve_url,
    strip_last_segment,
    build_item_link,
    ContentExtractor,
    ExtractedContent,
    AttributeRewriter,
    normalize_date,
)
from .formatters import FeedItem, FeedWriter
from .fetchers import WebFetcher, is_remote_source
from .generators import ItemConfig, ItemGenerator, load_config, process_html_content

__version__ = '0.1.0'

__all__ = [
    # Exceptions
    'HtmlToRssError',
    'SelectorNotFound',
    'InvalidUrl',
    'UnparseableDate',
    'MissingChannelMarker',
    'IoFailure',
    # Utils
    'compact_whitespace',
    'escape_xml',
    'insert_before_marker',
    'create_retry_session',
    # Core
    'ReferenceKind',
    'classify_reference',
    'resolve_url',
    'strip_last_segment',
    'build_item_link',
    'ContentExtractor',
    'ExtractedContent',
    'AttributeRewriter',
    'normalize_date',
    # Formatters
    'FeedItem',
    'FeedWriter',
    # Fetchers
    'WebFetcher',
    'is_remote_source',
    # Generators
    'ItemConfig',
    'ItemGenerator',
    'load_config',
    'process_html_content',
]
