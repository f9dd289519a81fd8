from PySubRip.Helpers.Parse import (
    IsSequenceNumber,
    MatchCoordinates,
    MatchTimeRange,
    SkipToFirstDigit,
    SplitBlocks,
)
from PySubRip.Helpers.TestCases import LoggedTestCase
from PySubRip.SubRipCoordinates import SubRipCoordinates
from PySubRip.SubRipTime import SubRipTime


class TestSplitBlocks(LoggedTestCase):
    test_cases = [
        ("1\na\n\n2\nb", ["1\na", "2\nb"]),
        ("1\r\na\r\n\r\n2\r\nb", ["1\na", "2\nb"]),
        ("1\ra\r\r2\rb", ["1\na", "2\nb"]),
        ("\n\n  1\na\n\n2\nb\n\n\n", ["1\na", "2\nb"]),
        ("1\na\n\n\n\n2\nb", ["1\na", "", "2\nb"]),
        ("1\na\n\n\n2\nb", ["1\na", "\n2\nb"]),
        ("", []),
        ("  \n\r\n\t ", []),
    ]

    def test_SplitBlocks(self):
        for value, expected in self.test_cases:
            with self.subTest(value=value):
                result = SplitBlocks(value)
                self.assertLoggedSequenceEqual("blocks", expected, result, input_value=value)


class TestSequenceNumbers(LoggedTestCase):
    def test_IsSequenceNumber(self):
        test_cases = [
            ("1", True),
            ("0042", True),
            ("123456789012345678", True),
            ("1234567890123456789", False),
            ("9" * 5000, False),
            ("", False),
            ("1a", False),
            ("-1", False),
            ("+1", False),
            (" 1", False),
            ("\u0661", False),
            ("bar", False),
        ]
        for value, expected in test_cases:
            with self.subTest(value=value):
                self.assertLoggedEqual("is sequence number", expected, IsSequenceNumber(value), input_value=value)

    def test_SkipToFirstDigit(self):
        test_cases = [
            ("\ufeff1", "1"),
            ("1", "1"),
            ("abc12", "12"),
            ("##3x", "3x"),
            ("no digits", "no digits"),
            ("", ""),
        ]
        for value, expected in test_cases:
            with self.subTest(value=value):
                self.assertLoggedEqual("skipped to digit", expected, SkipToFirstDigit(value), input_value=value)


class TestTimeRange(LoggedTestCase):
    def test_MatchTimeRange(self):
        test_cases = [
            ("00:02:13,100 --> 00:02:17,950", (SubRipTime(0, 2, 13, 100), SubRipTime(0, 2, 17, 950))),
            ("01:52:45,000 --> 01:53:00,400", (SubRipTime(1, 52, 45, 0), SubRipTime(1, 53, 0, 400))),
            ("0:90:00,000 --> 100:00:00,5", (SubRipTime(0, 90, 0, 0), SubRipTime(100, 0, 0, 5))),
            ("00:00:01,000 --> 00:00:02,000 X1:1 X2:2 Y1:3 Y2:4", (SubRipTime(0, 0, 1, 0), SubRipTime(0, 0, 2, 0))),
            ("not a time", None),
            ("00:00:01.000 --> 00:00:02.000", None),
            ("00:00:01,000 -> 00:00:02,000", None),
            ("00:00:01,000-->00:00:02,000", None),
            (" 00:00:01,000 --> 00:00:02,000", None),
            ("", None),
        ]
        for value, expected in test_cases:
            with self.subTest(value=value):
                self.assertLoggedEqual("time range", expected, MatchTimeRange(value), input_value=value)

    def test_OversizedFieldsDoNotMatch(self):
        test_cases = [
            "9" * 5000 + ":00:00,000 --> 00:00:02,000",
            "00:00:01,000 --> 00:00:02," + "9" * 5000,
            "1" * 19 + ":00:00,000 --> 00:00:02,000",
        ]
        for value in test_cases:
            with self.subTest(length=len(value)):
                self.assertLoggedIsNone("time range", MatchTimeRange(value))


class TestCoordinates(LoggedTestCase):
    def test_MatchCoordinates(self):
        test_cases = [
            ("00:02:13,100 --> 00:02:17,950 X1:100 X2:200 Y1:100 Y2:200", SubRipCoordinates(100, 200, 100, 200)),
            ("00:02:13,100 --> 00:02:17,950 X1:100 X2:200 Y1:100 Y2: 200", SubRipCoordinates(100, 200, 100, 200)),
            ("00:02:13,100 --> 00:02:17,950 X1:1 X2:2 Y1:3 Y2:4 trailing", SubRipCoordinates(1, 2, 3, 4)),
            ("00:02:13,100 --> 00:02:17,950", None),
            ("00:02:13,100 --> 00:02:17,950 X1:abc X2:2 Y1:3 Y2:4", None),
            ("00:02:13,100 --> 00:02:17,950 X1:1 X2:2 Y1:3", None),
            ("00:02:13,100 --> 00:02:17,950 X1:1  X2:2 Y1:3 Y2:4", None),
            ("00:02:13,100 --> 00:02:17,950 X2:2 X1:1 Y1:3 Y2:4", None),
            ("X1:1 X2:2 Y1:3 Y2:4", None),
        ]
        for value, expected in test_cases:
            with self.subTest(value=value):
                self.assertLoggedEqual("coordinates", expected, MatchCoordinates(value), input_value=value)

    def test_NoPartialValues(self):
        coordinates = MatchCoordinates("00:00:01,000 --> 00:00:02,000 X1:10 X2:20 Y1:30 Y2:x")
        self.assertLoggedIsNone("no coordinates", coordinates)

    def test_OversizedFieldsDoNotMatch(self):
        test_cases = [
            "00:00:01,000 --> 00:00:02,000 X1:" + "9" * 5000 + " X2:2 Y1:3 Y2:4",
            "00:00:01,000 --> 00:00:02,000 X1:1 X2:2 Y1:3 Y2:" + "9" * 5000,
        ]
        for value in test_cases:
            with self.subTest(length=len(value)):
                self.assertLoggedIsNone("coordinates", MatchCoordinates(value))
