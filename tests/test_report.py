"""Unit tests for report.py — layouts and number formatting."""

import unittest

from cocomo.estimator import compute_estimate
from cocomo.report import decimal, integer, render_report
from cocomo.schema import OutputFormat


def _scenario(**kwargs):
    return compute_estimate(10000, **kwargs)


class TestNumberFormatting(unittest.TestCase):
    def test_integer_groups_thousands(self):
        self.assertEqual(integer(1234567.0), "1,234,567")

    def test_integer_rounds(self):
        self.assertEqual(integer(303138.87), "303,139")

    def test_decimal_two_places(self):
        self.assertEqual(decimal(3.081704), "3.08")
        self.assertEqual(decimal(2.4), "2.40")

    def test_decimal_groups_thousands(self):
        self.assertEqual(decimal(303138.867), "303,138.87")

    def test_non_finite(self):
        # NaN is mixed case; infinities keep the format spec spelling
        self.assertEqual(decimal(float("nan")), "NaN")
        self.assertEqual(decimal(float("inf")), "inf")
        self.assertEqual(decimal(float("-inf")), "-inf")
        self.assertEqual(integer(float("nan")), "NaN")
        self.assertEqual(integer(-float("nan")), "NaN")


class TestMarkdownTable(unittest.TestCase):
    def test_scenario(self):
        expected = (
            "Description                | Value\n"
            "---------------------------|---------------------------------\n"
            "Total Source Lines of Code | 10,000\n"
            "Estimated Cost to Develop  | $303,138.87\n"
            "Estimated Schedule Effort  | 8.74 months\n"
            "Estimated People Required  | 3.08\n"
        )
        self.assertEqual(render_report(_scenario()), expected)

    def test_default_format_is_table(self):
        result = _scenario()
        self.assertEqual(
            render_report(result), render_report(result, OutputFormat.MARKDOWN_TABLE)
        )

    def test_currency_symbol(self):
        report = render_report(_scenario(currency="€"))
        self.assertIn("| €303,138.87", report)

    def test_zero_sloc_renders_nan_staffing(self):
        report = render_report(compute_estimate(0))
        self.assertIn("Total Source Lines of Code | 0\n", report)
        self.assertIn("Estimated Cost to Develop  | $0.00\n", report)
        self.assertIn("Estimated Schedule Effort  | 0.00 months\n", report)
        self.assertIn("Estimated People Required  | NaN\n", report)


class TestSloccount(unittest.TestCase):
    def test_scenario(self):
        expected = (
            "Total Physical Source Lines of Code (SLOC)                    = 10,000\n"
            "Development Effort Estimate, Person-Years (Person-Months)     = 2.24 (26.93)\n"
            "  (Basic COCOMO model, Person-Months = 2.40*(KSLOC**1.05)*1.00)\n"
            "Schedule Estimate, Years (Months)                             = 0.73 (8.74)\n"
            "  (Basic COCOMO model, Months = 2.50*(person-months**0.38))\n"
            "Estimated Average Number of Developers (Effort/Schedule)      = 3.08\n"
            "Total Estimated Cost to Develop                               = $303,139\n"
            "  (average salary = $56,286/year, overhead = 2.40)\n"
        )
        self.assertEqual(render_report(_scenario(), OutputFormat.SLOCCOUNT), expected)

    def test_no_inflation_line(self):
        report = render_report(_scenario(inflation_year=2024), OutputFormat.SLOCCOUNT)
        self.assertNotIn("inflation year", report)


class TestSloccountInflation(unittest.TestCase):
    def test_with_year(self):
        report = render_report(_scenario(inflation_year=2024), OutputFormat.SLOCCOUNT_INFLATION)
        lines = report.splitlines()
        self.assertEqual(len(lines), 9)
        self.assertEqual(
            lines[6],
            "Total Estimated Cost to Develop                               = $621,010",
        )
        self.assertEqual(lines[7], "  (average salary = $115,307/year, overhead = 2.40)")
        self.assertEqual(
            lines[8],
            "  (inflation year = 2024, multiplier = 2.05, 1995 salary = $56,286/year)",
        )

    def test_without_year(self):
        report = render_report(_scenario(), OutputFormat.SLOCCOUNT_INFLATION)
        self.assertTrue(
            report.endswith(
                "  (inflation year = none, multiplier = 1.00, 1995 salary = $56,286/year)\n"
            )
        )

    def test_shares_narrative_with_sloccount(self):
        result = _scenario(inflation_multiplier=1.5)
        narrative = render_report(result, OutputFormat.SLOCCOUNT)
        self.assertTrue(render_report(result, OutputFormat.SLOCCOUNT_INFLATION).startswith(narrative))


class TestEstimateExport(unittest.TestCase):
    def test_to_dict(self):
        data = _scenario().to_dict()
        self.assertEqual(data["sloc"], 10000)
        self.assertEqual(data["currency"], "$")
        self.assertEqual(data["inputs"]["project_type"], "organic")
        self.assertEqual(data["inputs"]["coefficients"]["a"], 2.4)
        self.assertAlmostEqual(data["people"], 3.081704, places=5)

    def test_to_json_nan(self):
        self.assertIn('"people": NaN', compute_estimate(0).to_json())

    def test_to_yaml(self):
        text = _scenario(inflation_year=2024).to_yaml()
        self.assertIn("sloc: 10000", text)
        self.assertIn("inflation_year: 2024", text)


if __name__ == "__main__":
    unittest.main()
