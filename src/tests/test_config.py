import unittest
from datetime import datetime, timedelta, timezone

from timezoom.config import ViewportConfig
from timezoom.timestamps import MS_PER_HOUR, from_ms, to_ms


class TestViewportConfig(unittest.TestCase):
    def test_defaults(self):
        config = ViewportConfig()
        self.assertEqual(0.85, config.zoom_in_factor)
        self.assertEqual(1.15, config.zoom_out_factor)
        self.assertEqual(MS_PER_HOUR, config.min_visible_duration)
        self.assertEqual(2.0, config.max_range_multiple)

    def test_invalid_values(self):
        for kwargs in (
            {"zoom_in_factor": 1.0},
            {"zoom_in_factor": 0},
            {"zoom_out_factor": 0.9},
            {"min_visible_duration": 0},
            {"max_range_multiple": 0.5},
        ):
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    ViewportConfig(**kwargs)


class TestTimestamps(unittest.TestCase):
    def test_to_ms_and_back(self):
        moment = datetime(2024, 3, 5, 12, 30, 15, 250000, tzinfo=timezone.utc)
        ms = to_ms(moment)
        self.assertEqual(1709641815250, ms)
        self.assertEqual(moment, from_ms(ms))

    def test_naive_datetime_uses_given_zone(self):
        plus_one = timezone(timedelta(hours=1))
        self.assertEqual(to_ms(datetime(2024, 1, 1, tzinfo=timezone.utc)) - MS_PER_HOUR, to_ms(datetime(2024, 1, 1), plus_one))
        self.assertEqual(0, to_ms(datetime(1970, 1, 1)))


if __name__ == '__main__':
    unittest.main()
