import unittest
import datetime

from timeboard.periods import Granularity, LabelFormat, Period, format_label, resolve

UTC = datetime.timezone.utc


def midnight(year, month, day):
    return datetime.datetime(year, month, day, tzinfo=UTC)


class TestResolve(unittest.TestCase):
    def setUp(self):
        # A Wednesday
        self.ref = datetime.date(2025, 3, 12)

    def test_today(self):
        r = resolve(Period.TODAY, self.ref, UTC)
        self.assertEqual((r.start, r.end), (midnight(2025, 3, 12), midnight(2025, 3, 13)))
        self.assertEqual(r.granularity, Granularity.HOUR)

    def test_last_three_days_includes_reference(self):
        r = resolve(Period.LAST_3_DAYS, self.ref, UTC)
        self.assertEqual((r.start, r.end), (midnight(2025, 3, 10), midnight(2025, 3, 13)))
        self.assertEqual(r.granularity, Granularity.DAY)
        self.assertEqual(r.label_format, LabelFormat.DAY_MONTH)
        self.assertEqual(len(r.days()), 3)

    def test_week_starts_monday(self):
        r = resolve(Period.WEEK, self.ref, UTC)
        self.assertEqual((r.start, r.end), (midnight(2025, 3, 10), midnight(2025, 3, 17)))
        self.assertEqual(r.label_format, LabelFormat.WEEKDAY)

    def test_week_on_sunday(self):
        r = resolve(Period.WEEK, datetime.date(2025, 3, 16), UTC)
        self.assertEqual(r.start, midnight(2025, 3, 10))

    def test_month(self):
        r = resolve(Period.MONTH, datetime.date(2025, 12, 31), UTC)
        self.assertEqual((r.start, r.end), (midnight(2025, 12, 1), midnight(2026, 1, 1)))
        self.assertEqual(len(r.days()), 31)

    def test_year(self):
        r = resolve(Period.YEAR, self.ref, UTC)
        self.assertEqual((r.start, r.end), (midnight(2025, 1, 1), midnight(2026, 1, 1)))
        self.assertEqual(r.granularity, Granularity.MONTH)
        self.assertEqual(r.label_format, LabelFormat.MONTH_NAME)

    def test_every_period_resolves_ordered_range(self):
        for period in Period:
            for ref in (datetime.date(2024, 2, 29), datetime.date(2025, 1, 1), datetime.date(2025, 12, 31)):
                with self.subTest(period=period, ref=ref):
                    r = resolve(period, ref, UTC)
                    self.assertLessEqual(r.start, r.end)
                    self.assertTrue(r.start.date() <= ref < r.end.date())

    def test_accepts_datetime_reference(self):
        r = resolve(Period.TODAY, datetime.datetime(2025, 3, 12, 18, 30), UTC)
        self.assertEqual(r.start, midnight(2025, 3, 12))

    def test_local_zone_by_default(self):
        r = resolve(Period.TODAY, self.ref)
        self.assertIsNotNone(r.start.tzinfo)
        self.assertEqual(r.start.date(), self.ref)


class TestPeriodKeys(unittest.TestCase):
    def test_from_key(self):
        self.assertIs(Period.from_key("3days"), Period.LAST_3_DAYS)
        self.assertIs(Period.from_key("year"), Period.YEAR)

    def test_unknown_key(self):
        with self.assertRaises(ValueError):
            Period.from_key("decade")

    def test_unknown_key_with_default_logs_and_falls_back(self):
        with self.assertLogs("timeboard.periods", "WARNING") as logs:
            self.assertIs(Period.from_key("decade", default=Period.WEEK), Period.WEEK)
        self.assertIn("decade", logs.output[0])


class TestLabels(unittest.TestCase):
    def test_formats(self):
        moment = datetime.datetime(2025, 3, 9, 7, 45, tzinfo=UTC)
        self.assertEqual(format_label(moment, LabelFormat.HOUR), "07:00")
        self.assertEqual(format_label(moment, LabelFormat.DAY_MONTH), "09/03")
        self.assertEqual(format_label(moment, LabelFormat.WEEKDAY), "Sun")
        self.assertEqual(format_label(moment, LabelFormat.MONTH_NAME), "Mar")


if __name__ == "__main__":
    unittest.main()
