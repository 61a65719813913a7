#!/usr/bin/env python3
"""Tests for the command line entry point."""

import io
import logging
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout

import main


class TestMain(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        root = logging.getLogger()
        self._saved_handlers = root.handlers[:]
        self._saved_level = root.level

    def tearDown(self):
        root = logging.getLogger()
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in self._saved_handlers:
            root.addHandler(handler)
        root.setLevel(self._saved_level)
        shutil.rmtree(self.temp_dir)

    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main.main(argv)
        return code, out.getvalue()

    def test_methods_from_flags(self):
        code, out = self.run_main(['--method', 'sw-graph:NN=10,ef=5', '--method', 'seq_search'])
        self.assertEqual(code, 0)
        self.assertIn('sw-graph: NN=10 ef=5', out)
        self.assertIn('seq_search:', out)

    def test_methods_from_config(self):
        path = os.path.join(self.temp_dir, 'config.yaml')
        with open(path, 'w', encoding='utf-8') as f:
            f.write("methods:\n  - name: vptree\n    params: ['bucketSize=50']\n")
        code, out = self.run_main(['--config', path, '--method', 'seq_search'])
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertIn('vptree: bucketSize=50', lines)
        self.assertLess(lines.index('vptree: bucketSize=50'), lines.index('seq_search:'))

    def test_bad_method_desc(self):
        code, _ = self.run_main(['--method', 'sw-graph:NN'])
        self.assertEqual(code, 1)

    def test_missing_config(self):
        code, _ = self.run_main(['--config', os.path.join(self.temp_dir, 'missing.yaml')])
        self.assertEqual(code, 1)


if __name__ == '__main__':
    unittest.main()
