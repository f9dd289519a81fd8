from __future__ import annotations

from datetime import timedelta

import regex

from PySubRip.SubRipError import SubRipParseError

class SubRipTime:
    """
    Elapsed time since the start of playback, held as separate hour, minute, second and millisecond fields.

    Fields are stored exactly as given: nothing is carried between them, so a time of 90 minutes
    stays 90 minutes rather than becoming 1 hour 30 minutes. Equality compares the fields, not the total duration.
    """
    _TIMECODE_PATTERN = regex.compile(r'^\s*([0-9]{1,18}):([0-9]{1,18}):([0-9]{1,18})[,.]([0-9]{1,18})\s*$')

    __slots__ = ('hours', 'minutes', 'seconds', 'milliseconds')

    def __init__(self, hours : int = 0, minutes : int = 0, seconds : int = 0, milliseconds : int = 0):
        self.hours : int = hours
        self.minutes : int = minutes
        self.seconds : int = seconds
        self.milliseconds : int = milliseconds

    @property
    def is_zero(self) -> bool:
        return self.hours == 0 and self.minutes == 0 and self.seconds == 0 and self.milliseconds == 0

    @property
    def total_milliseconds(self) -> int:
        return ((self.hours * 60 + self.minutes) * 60 + self.seconds) * 1000 + self.milliseconds

    def ToTimedelta(self) -> timedelta:
        """
        Convert to a timedelta, carrying any out-of-range fields into the total
        """
        return timedelta(hours=self.hours, minutes=self.minutes, seconds=self.seconds, milliseconds=self.milliseconds)

    @classmethod
    def FromTimedelta(cls, value : timedelta) -> SubRipTime:
        """
        Decompose a timedelta into normalised fields (sub-millisecond precision is truncated)
        """
        total_ms = (value.days * 86400 + value.seconds) * 1000 + value.microseconds // 1000
        hours, remainder = divmod(total_ms, 3600000)
        minutes, remainder = divmod(remainder, 60000)
        seconds, milliseconds = divmod(remainder, 1000)
        return cls(hours, minutes, seconds, milliseconds)

    @classmethod
    def FromString(cls, text : str) -> SubRipTime:
        """
        Strictly parse an SRT timecode (H:MM:SS,mmm). A '.' is accepted in place of the ','.

        Raises SubRipParseError if the text is not a timecode.
        """
        match = cls._TIMECODE_PATTERN.match(text or "")
        if not match:
            raise SubRipParseError(f"Invalid SRT timecode: {repr(text)}")

        hours, minutes, seconds, milliseconds = (int(group) for group in match.groups())
        return cls(hours, minutes, seconds, milliseconds)

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, SubRipTime):
            return NotImplemented
        return (self.hours, self.minutes, self.seconds, self.milliseconds) == (other.hours, other.minutes, other.seconds, other.milliseconds)

    def __hash__(self) -> int:
        return hash((self.hours, self.minutes, self.seconds, self.milliseconds))

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d},{self.milliseconds:03d}"

    def __repr__(self) -> str:
        return f"SubRipTime(hours={self.hours}, minutes={self.minutes}, seconds={self.seconds}, milliseconds={self.milliseconds})"
