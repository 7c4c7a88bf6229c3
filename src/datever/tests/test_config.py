# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


"""
test configuration settings
"""
import unittest
from datever.tests.util import TestBase, TempdirMixin
from datever.exceptions import ConfigurationError
from datever.config import Config, config, get_module_root_config
import os
import os.path


class TestConfig(TestBase, TempdirMixin):
    @classmethod
    def setUpClass(cls):
        TempdirMixin.setUpClass()
        cls.settings = {}
        cls.root_config_file = get_module_root_config()

    @classmethod
    def tearDownClass(cls):
        TempdirMixin.tearDownClass()

    def _write(self, filename, content):
        filepath = os.path.join(self.root, filename)
        with open(filepath, 'w') as f:
            f.write(content)
        return filepath

    def _test_basic(self, c):
        self.assertEqual(type(c.parse_cache_size), int)
        self.assertEqual(type(c.range_compare_mode), str)
        self.assertEqual(type(c.debug_all), bool)

    def test_1(self):
        """Test just the root config file."""
        c = Config([self.root_config_file], locked=True)
        c.validate_data()

        self._test_basic(c)
        self.assertEqual(c.parse_cache_size, 1024)
        self.assertEqual(c.range_compare_mode, "partial")
        self.assertEqual(c.debug_parsing, False)
        self.assertEqual(c.sourced_filepaths, [self.root_config_file])
        self.assertEqual(set(c.data), set(c._schema_keys))

        # check that an env-var override doesn't affect locked config
        os.environ["DATEVER_DEBUG_ALL"] = "true"
        self.assertEqual(c.debug_all, False)

    def test_2(self):
        """Test a config with an overriding file."""
        conf = self._write("test2.yaml",
                           "debug_resolve: true\n"
                           "range_compare_mode: lexicographic\n")

        c = Config([self.root_config_file, conf], locked=True)
        self._test_basic(c)
        self.assertEqual(c.debug_resolve, True)
        self.assertEqual(c.range_compare_mode, "lexicographic")
        self.assertEqual(c.parse_cache_size, 1024)
        self.assertEqual(c.sourced_filepaths, [self.root_config_file, conf])

    def test_3(self):
        """Test that a python config file is preferred to a yaml one."""
        self._write("test3.py", "import os\nparse_cache_size = 8\n")
        conf = self._write("test3.yaml", "parse_cache_size: 16\n")

        c = Config([self.root_config_file, conf], locked=True)
        self.assertEqual(c.parse_cache_size, 8)
        self.assertEqual(c.sourced_filepaths[-1],
                         os.path.join(self.root, "test3.py"))

        # missing files are skipped
        c = Config([self.root_config_file, os.path.join(self.root, "nope")],
                   locked=True)
        self.assertEqual(c.sourced_filepaths, [self.root_config_file])

    def test_4(self):
        """Test environment variable config overrides."""
        os.environ["DATEVER_DEBUG_ALL"] = "yes"
        os.environ["DATEVER_PARSE_CACHE_SIZE"] = "16"
        os.environ["DATEVER_RANGE_COMPARE_MODE_JSON"] = '"lexicographic"'

        c = Config([self.root_config_file], locked=False)
        self.assertEqual(c.debug_all, True)
        self.assertEqual(c.parse_cache_size, 16)
        self.assertEqual(c.range_compare_mode, "lexicographic")

        # an override beats the environment
        c.override("parse_cache_size", 4)
        self.assertEqual(c.parse_cache_size, 4)
        c.remove_override("parse_cache_size")
        self.assertEqual(c.parse_cache_size, 16)

    def test_5(self):
        """Test misconfigurations."""
        def _check(name, value):
            os.environ[name] = value
            c = Config([self.root_config_file], locked=False)
            try:
                with self.assertRaises(ConfigurationError):
                    c.validate_data()
            finally:
                del os.environ[name]

        _check("DATEVER_PARSE_CACHE_SIZE", "lots")
        _check("DATEVER_PARSE_CACHE_SIZE_JSON", "-1")
        _check("DATEVER_RANGE_COMPARE_MODE", "total")
        _check("DATEVER_DEBUG_ALL", "maybe")
        _check("DATEVER_QUIET_JSON", "{")

        conf = self._write("test5.yaml", "parse_cache_size: [1, 2\n")
        c = Config([self.root_config_file, conf], locked=True)
        self.assertRaises(ConfigurationError, c.validate_data)

        conf = self._write("test5b.yaml", "- debug_all\n")
        c = Config([self.root_config_file, conf], locked=True)
        self.assertRaises(ConfigurationError, c.validate_data)

        conf = self._write("test5c.py", "quiet = undefined_name\n")
        c = Config([self.root_config_file, conf], locked=True)
        self.assertRaises(ConfigurationError, c.validate_data)

    def test_overrides(self):
        c = Config([self.root_config_file], locked=True)

        c.override("range_compare_mode", "lexicographic")
        self.assertEqual(c.range_compare_mode, "lexicographic")

        c.remove_override("range_compare_mode")
        self.assertNotIn("range_compare_mode", c.overrides)
        self.assertEqual(c.range_compare_mode, "partial")

        self.assertRaises(AttributeError, c.override, "nope", 1)

        c.override("parse_cache_size", -1)
        with self.assertRaises(ConfigurationError):
            c.parse_cache_size

        c2 = c.copy(overrides={"quiet": True})
        self.assertEqual(c2.quiet, True)
        self.assertEqual(c.quiet, False)

    def test_debug(self):
        c = Config([self.root_config_file], locked=True)
        self.assertFalse(c.debug("parsing"))
        self.assertFalse(c.debug_printer("parsing"))

        c.override("debug_resolve", True)
        self.assertTrue(c.debug("resolve"))
        self.assertTrue(c.debug_printer("resolve"))
        self.assertFalse(c.debug("parsing"))

        c.override("debug_all", True)
        self.assertTrue(c.debug("parsing"))

        c.override("debug_none", True)
        self.assertFalse(c.debug("parsing"))
        self.assertFalse(c.debug("resolve"))

        c.remove_override("debug_none")
        c.override("quiet", True)
        self.assertFalse(c.debug("resolve"))

    def test_main_config(self):
        """Test the config files and env-vars that make up the main config."""
        conf = self._write("main.yaml", "debug_parsing: true\n")
        os.environ["DATEVER_CONFIG_FILE"] = conf
        os.environ["DATEVER_DISABLE_HOME_CONFIG"] = "1"
        os.environ["DATEVER_QUIET"] = "1"

        c = Config._create_main_config()
        self.assertEqual(c.filepaths, [self.root_config_file, conf])
        self.assertEqual(c.debug_parsing, True)
        self.assertEqual(c.quiet, True)

        c = Config._create_main_config(overrides={"debug_resolve": True})
        self.assertEqual(c.debug_resolve, True)

    def test_swap(self):
        other = Config([self.root_config_file],
                       overrides={"range_compare_mode": "lexicographic"},
                       locked=True)

        config._swap(other)
        try:
            self.assertEqual(config.range_compare_mode, "lexicographic")
        finally:
            config._swap(other)

        self.assertEqual(config.range_compare_mode, "partial")


if __name__ == '__main__':
    unittest.main()
