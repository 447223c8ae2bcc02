import unittest
from datetime import datetime, timedelta, timezone

import numpy as np

from pyrefframe.core.time import GNSSTime, fractional_year, get_leap_seconds, to_fractional_year


class TestFractionalYear(unittest.TestCase):

    def test_start_of_year(self):
        self.assertEqual(fractional_year(datetime(2020, 1, 1)), 2020.0)
        self.assertEqual(fractional_year(datetime(2010, 1, 1)), 2010.0)

    def test_mid_year(self):
        # 2010 is not a leap year
        self.assertAlmostEqual(fractional_year(datetime(2010, 7, 2, 12)), 2010.5, places=12)
        # 2020 is a leap year
        self.assertAlmostEqual(fractional_year(datetime(2020, 7, 2)), 2020.5, places=12)

    def test_day_of_year(self):
        self.assertAlmostEqual(fractional_year(datetime(2023, 2, 22)), 2023 + 52 / 365, places=12)

    def test_end_of_year(self):
        value = fractional_year(datetime(2019, 12, 31, 23, 59, 59))
        self.assertLess(value, 2020.0)
        self.assertGreater(value, 2019.9999)

    def test_timezone_aware(self):
        dt = datetime(2020, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=9)))
        self.assertEqual(fractional_year(dt), 2020.0)


class TestLeapSeconds(unittest.TestCase):

    def test_table_lookup(self):
        self.assertEqual(get_leap_seconds(datetime(1980, 1, 6)), 0)
        self.assertEqual(get_leap_seconds(datetime(1981, 7, 1)), 1)
        self.assertEqual(get_leap_seconds(datetime(2010, 1, 1)), 15)
        self.assertEqual(get_leap_seconds(datetime(2016, 12, 31, 23, 59, 59)), 17)
        self.assertEqual(get_leap_seconds(datetime(2017, 1, 1)), 18)
        self.assertEqual(get_leap_seconds(datetime(2024, 6, 1)), 18)


class TestGNSSTime(unittest.TestCase):

    def test_normalizes_time_of_week(self):
        t = GNSSTime(2000, 604800.0 + 10.0)
        self.assertEqual(t.week, 2001)
        self.assertAlmostEqual(t.tow, 10.0)

        t = GNSSTime(2000, -10.0)
        self.assertEqual(t.week, 1999)
        self.assertAlmostEqual(t.tow, 604790.0)

    def test_invalid_time_system(self):
        with self.assertRaises(ValueError):
            GNSSTime(2000, 0.0, 'GLO')

    def test_datetime_round_trip(self):
        dt = datetime(2023, 2, 22, 12, 30, 15)
        for sys in ('GPS', 'GAL', 'BDS'):
            t = GNSSTime.from_datetime(dt, sys)
            self.assertEqual(t.to_datetime(), dt)

    def test_gps_epoch(self):
        t = GNSSTime.from_datetime(datetime(1980, 1, 6))
        self.assertEqual(t, GNSSTime(0, 0.0))

    def test_utc_conversion(self):
        utc = datetime(2023, 2, 22)
        t = GNSSTime.from_utc_datetime(utc)
        self.assertEqual(t.to_datetime(), utc + timedelta(seconds=18))
        self.assertEqual(t.to_utc_datetime(), utc)

    def test_bds_to_utc(self):
        # BDT runs 14 s behind GPS time
        gps = GNSSTime.from_utc_datetime(datetime(2023, 2, 22))
        bds = GNSSTime.from_datetime(gps.to_datetime() - timedelta(seconds=14), 'BDS')
        self.assertEqual(bds.to_utc_datetime(), datetime(2023, 2, 22))

    def test_fractional_year(self):
        t = GNSSTime.from_utc_datetime(datetime(2010, 1, 1))
        self.assertEqual(t.to_fractional_year(), 2010.0)

    def test_hash_and_str(self):
        self.assertEqual(hash(GNSSTime(2000, 1.0)), hash(GNSSTime(2000, 1.0)))
        self.assertEqual(str(GNSSTime(2000, 1.5, 'gal')), "GAL Week: 2000, TOW: 1.500")


class TestToFractionalYear(unittest.TestCase):

    def test_numbers(self):
        self.assertEqual(to_fractional_year(2010), 2010.0)
        self.assertIsInstance(to_fractional_year(2010), float)
        self.assertEqual(to_fractional_year(2010.25), 2010.25)
        self.assertEqual(to_fractional_year(np.float32(2010.5)), 2010.5)

    def test_datetime_and_gnss_time(self):
        self.assertEqual(to_fractional_year(datetime(2020, 1, 1)), 2020.0)
        self.assertEqual(to_fractional_year(GNSSTime.from_utc_datetime(datetime(2020, 1, 1))), 2020.0)

    def test_unsupported(self):
        for value in ("2020", None, True, [2020.0]):
            with self.assertRaises(TypeError):
                to_fractional_year(value)


if __name__ == '__main__':
    unittest.main()
