"""
核心模块
包含 URL 解析、内容提取、属性重写和日期规范化
"""

from .url_resolver import (
    ReferenceKind,
    classify_reference,
    resolve_url,
    strip_last_segment,
    build_item_link,
)
from .content_extractor import ContentExtractor, ExtractedContent
from .attribute_rewriter import AttributeRewriter
from .date_normalizer import normalize_date

__all__ = [
    'ReferenceKind',
    'classify_reference',
    'resolve_url',
    'strip_last_segment',
    'build_item_link',
    'ContentExtractor',
    'ExtractedContent',
    'AttributeRewriter',
    'normalize_date',
]
