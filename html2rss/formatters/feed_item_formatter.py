"""
RSS条目格式化模块
把标题、链接、内容和日期组装成 <item> 片段
"""

from dataclasses import dataclass

from ..utils import escape_xml


def wrap_cdata(text: str) -> str:
    """用 CDATA 包裹文本，内容中的 ]]> 会被拆到两个 CDATA 段里"""
    return '<![CDATA[' + text.replace(']]>', ']]]]><![CDATA[>') + ']]>'


@dataclass(frozen=True)
class FeedItem:
    """RSS条目，link 同时作为 guid"""
    title: str
    link: str
    description: str
    pub_date: str
    guid: str

    @classmethod
    def build(cls, title: str, description: str, link: str, pub_date: str) -> 'FeedItem':
        """
        创建条目

        Args:
            title: 标题（未转义）
            description: HTML内容
            link: 条目的绝对URL
            pub_date: RFC 2822 日期

        Returns:
            FeedItem
        """
        return cls(title=title, link=link, description=description, pub_date=pub_date, guid=link)

    def to_xml(self) -> str:
        """
        生成 <item> XML片段

        Returns:
            以换行结尾的XML片段
        """
        return f"""  <item>
    <title>{escape_xml(self.title)}</title>
    <link>{self.link}</link>
    <description>{wrap_cdata(self.description)}</description>
    <pubDate>{self.pub_date}</pubDate>
    <guid>{self.guid}</guid>
  </item>
"""
