"""Unit tests for config.py — EstimateConfig loading and validation."""

import os
import shutil
import tempfile
import unittest

from cocomo.config import EstimateConfig
from cocomo.constants import DEFAULT_AVERAGE_WAGE, DEFAULT_DEV_TIME
from cocomo.errors import ConfigError


class TestEstimateConfig(unittest.TestCase):
    def test_defaults(self):
        config = EstimateConfig()
        self.assertEqual(config.average_wage, DEFAULT_AVERAGE_WAGE)
        self.assertEqual(config.development_time, DEFAULT_DEV_TIME)
        self.assertIsNone(config.project_type)
        self.assertEqual(config.output_format, "markdown-table")

    def test_project_type_normalized(self):
        self.assertEqual(EstimateConfig(project_type="SemiDetached").project_type, "semi-detached")

    def test_custom_conflicts_with_project_type(self):
        with self.assertRaises(ConfigError):
            EstimateConfig(project_type="organic", custom="2.4,1.05,0.38")

    def test_invalid_output_format(self):
        with self.assertRaises(ConfigError):
            EstimateConfig(output_format="pdf")

    def test_from_dict_dashed_keys(self):
        config = EstimateConfig.from_dict({"average-wage": 90000.0, "eaf": 1.2})
        self.assertEqual(config.average_wage, 90000.0)
        self.assertEqual(config.eaf, 1.2)

    def test_from_dict_unknown_key(self):
        with self.assertRaises(ConfigError) as cm:
            EstimateConfig.from_dict({"salary": 1})
        self.assertIn("salary", str(cm.exception))

    def test_from_dict_unknown_project_type(self):
        with self.assertRaises(ConfigError):
            EstimateConfig.from_dict({"project_type": "agile"})

    def test_from_dict_empty(self):
        self.assertEqual(EstimateConfig.from_dict(None), EstimateConfig())

    def test_default_map_omits_unset(self):
        default_map = EstimateConfig(overhead=2.0).default_map()
        self.assertEqual(default_map["overhead"], 2.0)
        self.assertNotIn("custom", default_map)
        self.assertNotIn("project_type", default_map)
        self.assertNotIn("inflation_year", default_map)


class TestEstimateConfigYaml(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _write(self, text: str) -> str:
        path = os.path.join(self.tmpdir, "cocomo.yaml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_estimate_section(self):
        path = self._write("estimate:\n  average_wage: 95000\n  project_type: embedded\n")
        config = EstimateConfig.from_yaml(path)
        self.assertEqual(config.average_wage, 95000)
        self.assertEqual(config.project_type, "embedded")

    def test_top_level(self):
        path = self._write("overhead: 1.9\ninflation_year: 2020\n")
        config = EstimateConfig.from_yaml(path)
        self.assertEqual(config.overhead, 1.9)
        self.assertEqual(config.inflation_year, 2020)

    def test_empty_file(self):
        self.assertEqual(EstimateConfig.from_yaml(self._write("")), EstimateConfig())

    def test_not_a_mapping(self):
        with self.assertRaises(ConfigError):
            EstimateConfig.from_yaml(self._write("- a\n- b\n"))

    def test_invalid_yaml(self):
        with self.assertRaises(ConfigError):
            EstimateConfig.from_yaml(self._write("estimate: [unclosed\n"))

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            EstimateConfig.from_yaml(os.path.join(self.tmpdir, "missing.yaml"))


if __name__ == "__main__":
    unittest.main()
