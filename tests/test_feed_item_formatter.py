import tempfile
import unittest
from pathlib import Path

from html2rss.exceptions import IoFailure, MissingChannelMarker
from html2rss.formatters.feed_item_formatter import FeedItem, wrap_cdata
from html2rss.formatters.feed_writer import FeedWriter


FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Test Feed</title>
    <link>https://site/</link>
    <description>Test Description</description>
  </channel>
</rss>
"""


def make_item():
    return FeedItem.build(
        title='Tom & "Jerry" <3',
        description='<p>a & b</p><img src="https://site/blog/img/a.png">',
        link="https://site/blog/page.html",
        pub_date="Thu, 02 Jun 2022 14:30:00 GMT",
    )


class FeedItemTests(unittest.TestCase):
    def test_guid_matches_link(self):
        item = make_item()
        self.assertEqual(item.guid, item.link)

    def test_to_xml_field_order(self):
        xml = make_item().to_xml()
        positions = [xml.index(tag) for tag in ("<title>", "<link>", "<description>", "<pubDate>", "<guid>")]
        self.assertEqual(positions, sorted(positions))
        self.assertTrue(xml.strip().startswith("<item>"))
        self.assertTrue(xml.strip().endswith("</item>"))

    def test_title_escaped_description_verbatim(self):
        xml = make_item().to_xml()
        self.assertIn("<title>Tom &amp; &quot;Jerry&quot; &lt;3</title>", xml)
        self.assertIn(
            '<description><![CDATA[<p>a & b</p><img src="https://site/blog/img/a.png">]]></description>',
            xml
        )
        self.assertIn("<pubDate>Thu, 02 Jun 2022 14:30:00 GMT</pubDate>", xml)
        self.assertIn("<guid>https://site/blog/page.html</guid>", xml)

    def test_cdata_end_marker_is_split(self):
        self.assertEqual(wrap_cdata("a]]>b"), "<![CDATA[a]]]]><![CDATA[>b]]>")


class FeedWriterTests(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.rss_path = Path(self.tmp_dir.name) / "rss.xml"

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_add_item_before_first_channel_end(self):
        self.rss_path.write_text(FEED_XML + "<!-- </channel> -->\n", encoding="utf-8")
        item = make_item()

        FeedWriter(str(self.rss_path)).add_item(item)

        content = self.rss_path.read_text(encoding="utf-8")
        self.assertEqual(content.count("<item>"), 1)
        self.assertLess(content.index("<item>"), content.index("</channel>"))
        self.assertLess(content.index("<description>Test Description"), content.index("<item>"))
        self.assertIn(item.to_xml() + "</channel>", content)

    def test_missing_marker_leaves_file_untouched(self):
        original = "<rss><channel><title>x</title></rss>"
        self.rss_path.write_text(original, encoding="utf-8")

        with self.assertRaises(MissingChannelMarker):
            FeedWriter(str(self.rss_path)).add_item(make_item())

        self.assertEqual(self.rss_path.read_text(encoding="utf-8"), original)

    def test_missing_file_raises_io_failure(self):
        with self.assertRaises(IoFailure):
            FeedWriter(str(self.rss_path)).add_item(make_item())


if __name__ == "__main__":
    unittest.main()
