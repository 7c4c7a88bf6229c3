# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


import unittest
from datever import parser
from datever.config import config, _create_locked_config
from datever.utils.data_utils import deep_update
import tempfile
import shutil
import os


class TestBase(unittest.TestCase):
    """Unit test base class."""
    @classmethod
    def setUpClass(cls):
        cls.settings = {}

    def setUp(self):
        self.__environ = dict(os.environ)
        self.maxDiff = None

        # shield unit tests from any user config overrides
        self.setup_config()

    def tearDown(self):
        self.teardown_config()

        os.environ.clear()
        os.environ.update(self.__environ)

    def setup_config(self):
        # copy the overrides dict so that config changes from one test don't
        # affect another
        self._config = _create_locked_config(dict(self.settings))
        config._swap(self._config)

        # the parse cache is sized from config, and memoizes debug output
        parser.clear_cache()

    def teardown_config(self):
        config._swap(self._config)
        self._config = None
        parser.clear_cache()

    def update_settings(self, new_settings, override=False):
        """Modify settings for the current test only.

        new_settings : dict
            the updated settings to override the config with
        override : bool
            if True, the class's `settings` are ignored, rather than updated
            with `new_settings`
        """
        self.teardown_config()

        if override:
            self.settings = dict(new_settings)
        else:
            self.settings = dict(type(self).settings)
            deep_update(self.settings, new_settings)

        self.setup_config()


class TempdirMixin(object):
    """Mixin that adds tmpdir create/delete."""
    @classmethod
    def setUpClass(cls):
        cls.root = tempfile.mkdtemp(prefix="datever_selftest_")

    @classmethod
    def tearDownClass(cls):
        if os.getenv("DATEVER_KEEP_TMPDIRS"):
            print("Tempdir kept due to $DATEVER_KEEP_TMPDIRS: %s" % cls.root)
            return

        shutil.rmtree(cls.root, ignore_errors=True)
