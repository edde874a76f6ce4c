import os
import sys
import unittest

from setuptools import find_namespace_packages

SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
sys.path.append(SRC)


class PackagingTest(unittest.TestCase):
    def test_all_packages_are_found(self):
        packages = find_namespace_packages(
            where=SRC, include=["core*", "chemcalc*", "chemio*", "gui*"]
        )
        for name in ("core", "chemcalc", "chemio", "gui"):
            self.assertIn(name, packages)

    def test_gui_is_a_regular_package(self):
        self.assertTrue(os.path.isfile(os.path.join(SRC, "gui", "__init__.py")))


if __name__ == "__main__":
    unittest.main()
