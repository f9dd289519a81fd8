from __future__ import annotations

from datetime import timedelta
from typing import TypeAlias

from PySubRip.SubRipCoordinates import SubRipCoordinates
from PySubRip.SubRipError import SubRipParseError
from PySubRip.SubRipTime import SubRipTime

TimeValue : TypeAlias = SubRipTime | timedelta | str

class SubRipSubtitle:
    """
    A single numbered subtitle: timing, optional screen coordinates and caption text.

    Attributes:
        number (int): sequence number as declared in the source, not guaranteed to be contiguous or unique
        start_time (SubRipTime): when the caption appears
        end_time (SubRipTime): when the caption disappears
        coordinates (SubRipCoordinates): caption box, all zero when the source had none
        text (str): caption text, possibly multi-line, possibly empty
    """
    def __init__(self, number : int = 0, start_time : SubRipTime|None = None, end_time : SubRipTime|None = None,
                 coordinates : SubRipCoordinates|None = None, text : str = ""):
        self.number : int = number
        self.start_time : SubRipTime = start_time or SubRipTime()
        self.end_time : SubRipTime = end_time or SubRipTime()
        self.coordinates : SubRipCoordinates = coordinates or SubRipCoordinates()
        self.text : str = text

    @classmethod
    def Construct(cls, number : int, start : TimeValue, end : TimeValue, text : str|None,
                  coordinates : SubRipCoordinates|None = None) -> SubRipSubtitle:
        """
        Build a subtitle from SubRipTime, timedelta or SRT timecode string values.

        Raises SubRipParseError if a timecode string cannot be read.
        """
        return cls(
            number=number,
            start_time=_get_time(start),
            end_time=_get_time(end),
            coordinates=coordinates,
            text=text or ""
        )

    @property
    def duration(self) -> timedelta:
        return self.end_time.ToTimedelta() - self.start_time.ToTimedelta()

    def AppendText(self, text : str) -> None:
        """
        Append continuation text, replacing the caption outright if it is currently empty
        """
        if self.text == "":
            self.text = text
        else:
            self.text = f"{self.text}\n{text}"

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, SubRipSubtitle):
            return NotImplemented
        return (self.number == other.number
                and self.start_time == other.start_time
                and self.end_time == other.end_time
                and self.coordinates == other.coordinates
                and self.text == other.text)

    __hash__ = None # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SubRipSubtitle(number={self.number}, start_time={str(self.start_time)}, end_time={str(self.end_time)}, text={repr(self.text)})"

def _get_time(value : TimeValue) -> SubRipTime:
    if isinstance(value, SubRipTime):
        return value
    if isinstance(value, timedelta):
        return SubRipTime.FromTimedelta(value)
    if isinstance(value, str):
        return SubRipTime.FromString(value)

    raise SubRipParseError(f"Cannot convert {type(value).__name__} to a SubRip time")
