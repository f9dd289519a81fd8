import unittest
from collections.abc import Sequence
from typing import Any

from PySubRip.Helpers.Tests import log_input_expected_result, log_test_name

class LoggedTestCase(unittest.TestCase):
    """
    TestCase whose assertions log the description, input, expected and actual values
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def _log(self, description : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, expected, actual)

    def assertLoggedEqual(self, description : str, expected : Any, actual : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(description, expected, actual, input_value)
        self.assertEqual(expected, actual, msg or description)

    def assertLoggedNotEqual(self, description : str, unexpected : Any, actual : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(description, f"not {repr(unexpected)}", actual, input_value)
        self.assertNotEqual(unexpected, actual, msg or description)

    def assertLoggedSequenceEqual(self, description : str, expected : Sequence[Any], actual : Sequence[Any], msg : str|None = None, input_value : Any = None) -> None:
        self._log(description, expected, actual, input_value)
        self.assertSequenceEqual(expected, actual, msg or description)

    def assertLoggedTrue(self, description : str, condition : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(description, True, condition, input_value)
        self.assertTrue(condition, msg or description)

    def assertLoggedFalse(self, description : str, condition : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(description, False, condition, input_value)
        self.assertFalse(condition, msg or description)

    def assertLoggedIsNone(self, description : str, value : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(description, None, value, input_value)
        self.assertIsNone(value, msg or description)

    def assertLoggedIsNotNone(self, description : str, value : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(description, "not None", value, input_value)
        self.assertIsNotNone(value, msg or description)

    def assertLoggedIsInstance(self, description : str, value : Any, expected_type : type, msg : str|None = None, input_value : Any = None) -> None:
        self._log(description, expected_type.__name__, type(value).__name__, input_value)
        self.assertIsInstance(value, expected_type, msg or description)

    def assertLoggedIn(self, description : str, member : Any, container : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(description, member, container, input_value)
        self.assertIn(member, container, msg or description)

    def assertLoggedNotIn(self, description : str, member : Any, container : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(description, f"not {repr(member)}", container, input_value)
        self.assertNotIn(member, container, msg or description)
