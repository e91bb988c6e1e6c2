import unittest
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime

from html2rss.core.date_normalizer import format_rfc2822, normalize_date
from html2rss.exceptions import UnparseableDate


class NormalizeDateTests(unittest.TestCase):
    def test_various_date_formats(self):
        cases = [
            ("2022-06-02 14:30", "Thu, 02 Jun 2022 14:30:00 GMT"),
            ("2022-06-02 14:30:15", "Thu, 02 Jun 2022 14:30:15 GMT"),
            ("2022-06-02", "Thu, 02 Jun 2022 00:00:00 GMT"),
            ("Fri, 02 Jun 2023 14:30:00 +0000", "Fri, 02 Jun 2023 14:30:00 GMT"),
            ("Thu, 02 Jun 2022 16:30:00 +0200", "Thu, 02 Jun 2022 14:30:00 GMT"),
            ("2024-06-02T14:30:00Z", "Sun, 02 Jun 2024 14:30:00 GMT"),
            ("2024-06-16T14:30:00Z", "Sun, 16 Jun 2024 14:30:00 GMT"),
            ("2024-06-02T16:30:00+02:00", "Sun, 02 Jun 2024 14:30:00 GMT"),
            ("2022-06-02 14:30:00 +02:00", "Thu, 02 Jun 2022 12:30:00 GMT"),
            ("2022-06-02 14:30:00+02:00", "Thu, 02 Jun 2022 12:30:00 GMT"),
        ]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertEqual(normalize_date(value), expected)

    def test_normalize_is_idempotent(self):
        for value in ("2022-06-02 14:30", "2024-06-02T16:30:00+02:00", "Fri, 02 Jun 2023 14:30:00 +0000"):
            with self.subTest(value=value):
                once = normalize_date(value)
                self.assertEqual(normalize_date(once), once)

    def test_now_uses_current_time(self):
        before = datetime.now(timezone.utc).replace(microsecond=0)
        result = normalize_date("now")
        after = datetime.now(timezone.utc)

        self.assertTrue(result.endswith(" GMT"))
        parsed = parsedate_to_datetime(result)
        self.assertGreaterEqual(parsed, before)
        self.assertLessEqual(parsed, after + timedelta(seconds=1))

    def test_unparseable_date_raises(self):
        for value in ("not a date", "02/06/2022", "2022-13-45", ""):
            with self.subTest(value=value):
                with self.assertRaises(UnparseableDate):
                    normalize_date(value)

    def test_format_naive_datetime_as_utc(self):
        self.assertEqual(
            format_rfc2822(datetime(2022, 6, 2, 14, 30)),
            "Thu, 02 Jun 2022 14:30:00 GMT"
        )


if __name__ == "__main__":
    unittest.main()
