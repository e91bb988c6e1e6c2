"""
异常定义模块
所有致命错误都在写入 RSS 文件之前抛出
"""


class HtmlToRssError(Exception):
    """html2rss 所有错误的基类"""


class SelectorNotFound(HtmlToRssError):
    """HTML 中没有匹配 CSS 选择器的元素"""


class InvalidUrl(HtmlToRssError, ValueError):
    """基础 URL 或引用无法解析"""


class UnparseableDate(HtmlToRssError, ValueError):
    """日期字符串不符合任何支持的格式"""


class MissingChannelMarker(HtmlToRssError):
    """RSS 文件中没有 </channel> 标记"""


class IoFailure(HtmlToRssError):
    """文件读写或网络请求失败"""
