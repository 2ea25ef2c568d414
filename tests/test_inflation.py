"""Unit tests for inflation.py — table contents, lookups and wage adjustment."""

import unittest

from cocomo.inflation import (
    INFLATION_TABLE,
    adjust_wage,
    available_years,
    effective_multiplier,
    lookup_inflation,
)
from cocomo.schema import InflationEntry


class TestInflationTable(unittest.TestCase):
    def test_year_range(self):
        self.assertEqual(available_years(), (1995, 2024))
        self.assertEqual(len(INFLATION_TABLE), 30)

    def test_base_year_multiplier(self):
        self.assertEqual(INFLATION_TABLE[1995].multiplier, 1.0)

    def test_monotonic_apart_from_deflation(self):
        years = sorted(INFLATION_TABLE)
        for prev, year in zip(years, years[1:]):
            entry = INFLATION_TABLE[year]
            if entry.rate >= 0:
                self.assertGreaterEqual(
                    entry.multiplier, INFLATION_TABLE[prev].multiplier, f"{prev} -> {year}"
                )

    def test_2009_dips(self):
        self.assertLess(INFLATION_TABLE[2009].rate, 0)
        self.assertLess(INFLATION_TABLE[2009].multiplier, INFLATION_TABLE[2008].multiplier)

    def test_read_only(self):
        with self.assertRaises(TypeError):
            INFLATION_TABLE[2025] = InflationEntry(0.03, 2.1)


class TestLookupInflation(unittest.TestCase):
    def test_present(self):
        self.assertEqual(lookup_inflation(2024), InflationEntry(rate=0.0226, multiplier=2.0486))

    def test_absent_default(self):
        self.assertEqual(lookup_inflation(1800), InflationEntry(0.0, 1.0))

    def test_absent_uses_caller_multiplier(self):
        self.assertEqual(lookup_inflation(2099, default_multiplier=1.5), InflationEntry(0.0, 1.5))


class TestAdjustWage(unittest.TestCase):
    def test_no_year_no_multiplier(self):
        self.assertEqual(adjust_wage(56286.0), 56286.0)

    def test_no_year_uses_multiplier(self):
        self.assertAlmostEqual(adjust_wage(56286.0, 2.0), 112572.0)

    def test_base_year(self):
        self.assertEqual(adjust_wage(56286.0, 1.0, inflation_year=1995), 56286.0)

    def test_missing_year_falls_back(self):
        self.assertEqual(
            adjust_wage(56286.0, 1.0, inflation_year=1800),
            adjust_wage(56286.0, 1.0, inflation_year=None),
        )
        self.assertEqual(adjust_wage(56286.0, 1.0, inflation_year=1800), 56286.0)

    def test_missing_year_keeps_caller_multiplier(self):
        self.assertAlmostEqual(adjust_wage(100.0, 1.25, inflation_year=1800), 125.0)

    def test_table_year_overrides_multiplier(self):
        self.assertAlmostEqual(adjust_wage(100.0, 5.0, inflation_year=2024), 204.86)

    def test_effective_multiplier(self):
        self.assertEqual(effective_multiplier(), 1.0)
        self.assertEqual(effective_multiplier(1.3), 1.3)
        self.assertEqual(effective_multiplier(1.3, 2009), 1.4075)
        self.assertEqual(effective_multiplier(1.3, 3000), 1.3)


if __name__ == "__main__":
    unittest.main()
