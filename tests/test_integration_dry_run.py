import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

import yaml


PROJECT_ROOT = Path(__file__).resolve().parents[1]

PAGE = """<html>
<body>
<h1>Integration Post</h1>
<main>
<p>First line</p>
<img src="img/a.png">
</main>
</body>
</html>
"""

FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Test Feed</title>
    <link>https://site/</link>
    <description>Test Description</description>
  </channel>
</rss>
"""


class MainIntegrationTests(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp_dir.name)
        (self.root / "blog").mkdir()
        (self.root / "blog" / "page.html").write_text(PAGE, encoding="utf-8")
        self.rss_path = self.root / "rss.xml"
        self.rss_path.write_text(FEED_XML, encoding="utf-8")

    def tearDown(self):
        self.tmp_dir.cleanup()

    def run_main(self, *args):
        return subprocess.run(
            [sys.executable, str(PROJECT_ROOT / "main.py"), *args],
            cwd=str(self.root),
            capture_output=True,
            text=True,
            encoding="utf-8",
            env={**os.environ, "PYTHONIOENCODING": "utf-8"},
        )

    def test_main_dry_run_with_local_page(self):
        result = self.run_main(
            "-f", "blog/page.html",
            "-r", "rss.xml",
            "-b", "https://site/blog/",
            "-d", "2022-06-02 14:30",
            "--dry-run",
        )

        combined_output = f"{result.stdout}\n{result.stderr}"
        self.assertEqual(result.returncode, 0, msg=combined_output)
        self.assertIn("=== DRY RUN MODE ===", result.stdout)
        self.assertIn("<title>Integration Post</title>", result.stdout)
        self.assertIn('src="https://site/blog/img/a.png"', result.stdout)
        self.assertIn("<pubDate>Thu, 02 Jun 2022 14:30:00 GMT</pubDate>", result.stdout)
        self.assertEqual(self.rss_path.read_text(encoding="utf-8"), FEED_XML)

    def test_main_adds_item_using_config_file(self):
        config_path = self.root / "config.yaml"
        config_path.write_text(
            yaml.safe_dump({
                "item": {
                    "rss": "rss.xml",
                    "base_url": "https://site/blog/",
                    "lines_to_cut": 2,
                },
            }),
            encoding="utf-8"
        )

        result = self.run_main("--config", str(config_path), "-f", "blog/page.html", "-t", "Custom")

        combined_output = f"{result.stdout}\n{result.stderr}"
        self.assertEqual(result.returncode, 0, msg=combined_output)
        self.assertIn("RSS item successfully added", result.stdout)

        content = self.rss_path.read_text(encoding="utf-8")
        self.assertIn("<title>Custom</title>", content)
        self.assertIn("<link>https://site/blog/page.html</link>", content)
        self.assertNotIn("First line", content)

    def test_main_missing_selector_fails_without_writing(self):
        result = self.run_main(
            "-f", "blog/page.html",
            "-r", "rss.xml",
            "-b", "https://site/blog/",
            "-s", "#missing",
        )

        self.assertEqual(result.returncode, 1)
        self.assertIn("#missing", result.stderr)
        self.assertEqual(self.rss_path.read_text(encoding="utf-8"), FEED_XML)

    def test_main_requires_parent_url(self):
        result = self.run_main("-f", "blog/page.html", "-r", "rss.xml")
        self.assertEqual(result.returncode, 2)
        self.assertIn("--parent-url", result.stderr)


if __name__ == "__main__":
    unittest.main()
