#!/usr/bin/env python3
"""Tests unitaires pour le module errors."""

import unittest

from inifile_utils.errors import (IniFileError,
                                  LineIndexError,
                                  ConfigurationError,
                                  FileConfigurationError,
                                  UnknownCultureError)


class TestExceptionHierarchy(unittest.TestCase):
    """Tests de la hiérarchie des exceptions."""

    def test_line_index_error_est_index_error(self):
        """LineIndexError est capturable comme IndexError."""
        error = LineIndexError(5, 3)
        self.assertIsInstance(error, IndexError)
        self.assertIsInstance(error, IniFileError)

    def test_line_index_error_message(self):
        """Le message contient l'index et la taille du document."""
        error = LineIndexError(5, 3)
        self.assertEqual(error.index, 5)
        self.assertEqual(error.count, 3)
        self.assertIn("5", str(error))
        self.assertIn("3 lignes", str(error))

    def test_file_configuration_error_herite(self):
        """FileConfigurationError dérive de ConfigurationError."""
        self.assertTrue(issubclass(FileConfigurationError, ConfigurationError))
        self.assertTrue(issubclass(ConfigurationError, IniFileError))

    def test_unknown_culture_error(self):
        """UnknownCultureError liste les cultures disponibles."""
        error = UnknownCultureError("xx-XX", ["invariant", "de-DE"])
        self.assertIsInstance(error, ConfigurationError)
        self.assertEqual(error.name, "xx-XX")
        self.assertIn("'xx-XX'", str(error))
        self.assertIn("de-DE", str(error))


if __name__ == "__main__":
    unittest.main()
