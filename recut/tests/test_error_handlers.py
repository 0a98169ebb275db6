#!/usr/bin/env python3
"""
Tests for error formatting and exit code mapping
"""
import unittest

from recut.error_handlers import (
    format_error, handle_exceptions, exit_code_for,
    EXIT_OK, EXIT_ERROR, EXIT_USAGE, EXIT_UNEXPECTED, EXIT_INTERRUPTED
)
from recut.exceptions import (
    RecutError, ValidationError, ConfigurationError, CutOutOfRangeError, CutRangeError,
    CutRangeTypeError, SequenceRangeError, CalculatedCutsError
)


class TestExceptionHierarchy(unittest.TestCase):

    def test_domain_errors_match_builtins(self):
        self.assertTrue(issubclass(SequenceRangeError, ValueError))
        self.assertTrue(issubclass(CutOutOfRangeError, IndexError))
        self.assertTrue(issubclass(CutRangeTypeError, TypeError))
        self.assertTrue(issubclass(CalculatedCutsError, IndexError))

    def test_domain_errors_are_recut_errors(self):
        for error_class in (SequenceRangeError, CutOutOfRangeError, CutRangeTypeError, CalculatedCutsError):
            self.assertTrue(issubclass(error_class, RecutError))

    def test_details_default(self):
        error = ValidationError("bad")
        self.assertEqual(error.message, "bad")
        self.assertEqual(error.details, {})
        self.assertEqual(str(error), "bad")


class TestExitCodes(unittest.TestCase):

    def test_bad_input_is_usage_error(self):
        for error in (CutOutOfRangeError("x"), CutRangeTypeError("x"), SequenceRangeError("x"),
                      CutRangeError("x"), ValidationError("x")):
            self.assertEqual(exit_code_for(error), EXIT_USAGE, error.__class__.__name__)

    def test_other_recut_errors(self):
        self.assertEqual(exit_code_for(ConfigurationError("x")), EXIT_ERROR)
        self.assertEqual(exit_code_for(CalculatedCutsError("x")), EXIT_ERROR)

    def test_unexpected_and_interrupt(self):
        self.assertEqual(exit_code_for(RuntimeError("x")), EXIT_UNEXPECTED)
        self.assertEqual(exit_code_for(KeyboardInterrupt()), EXIT_INTERRUPTED)


class TestFormatError(unittest.TestCase):

    def test_details_shown_inline(self):
        error = CutOutOfRangeError("p_cut_left (9) is outside the sequence range 0-5",
                                   {'p_cut_left': 9, 'left': 0, 'right': 5})
        self.assertEqual(format_error(error),
                         "CutOutOfRangeError: p_cut_left (9) is outside the sequence range 0-5\n"
                         "[p_cut_left=9, left=0, right=5]")

    def test_listed_details(self):
        error = ConfigurationError("Invalid configuration", {'errors': ["first", "second"]})
        self.assertEqual(format_error(error),
                         "ConfigurationError: Invalid configuration\n  - first\n  - second")

    def test_no_details(self):
        self.assertEqual(format_error(CutRangeError("empty cut")), "CutRangeError: empty cut")

    def test_unexpected_error(self):
        self.assertEqual(format_error(KeyError('x')), "Unexpected Error: 'x'")


class TestHandleExceptions:

    def test_passes_result_through(self):
        @handle_exceptions
        def ok():
            return EXIT_OK

        assert ok() == 0

    def test_validation_error_is_usage(self, capsys):
        @handle_exceptions
        def fail():
            raise SequenceRangeError("Primary strand left (5) is greater than right (0)",
                                     {'p_left': 5, 'p_right': 0})

        assert fail() == 2
        err = capsys.readouterr().err
        assert "SequenceRangeError: Primary strand left (5)" in err
        assert "[p_left=5, p_right=0]" in err

    def test_configuration_error(self, capsys):
        @handle_exceptions
        def fail():
            raise ConfigurationError("Configuration file not found: x.yml")

        assert fail() == 1

    def test_unexpected_error(self, capsys):
        @handle_exceptions
        def fail():
            raise RuntimeError("boom")

        assert fail() == 3
        assert "Unexpected Error: boom" in capsys.readouterr().err

    def test_keyboard_interrupt(self, capsys):
        @handle_exceptions
        def interrupted():
            raise KeyboardInterrupt

        assert interrupted() == 130
