"""
PySubRip - SubRip (SRT) subtitle parsing and composition

Parsing is permissive: malformed input is recovered rather than rejected, so parse never raises.

Basic Usage
-----------

data = parse("1\\n00:02:13,100 --> 00:02:17,950 X1:100 X2:200 Y1:100 Y2:200\\nHello world")

for subtitle in data:
    print(subtitle.number, subtitle.start_time, subtitle.end_time, subtitle.text)

# Render the document back to SRT text (empty subtitles are dropped, the rest renumbered)
text = serialize(data)

# Find out what the parser had to recover from
data, anomalies = parse_with_anomalies(text)
"""
from __future__ import annotations

from collections.abc import Mapping

from PySubRip.SettingsType import SettingsError, SettingsType, SettingType
from PySubRip.SubRipAnomaly import AnomalyKind, ParseAnomaly
from PySubRip.SubRipComposer import SubRipComposer
from PySubRip.SubRipCoordinates import SubRipCoordinates
from PySubRip.SubRipData import SubRipData
from PySubRip.SubRipError import SubRipError, SubRipParseError
from PySubRip.SubRipParser import SubRipParser
from PySubRip.SubRipSubtitle import SubRipSubtitle
from PySubRip.SubRipTime import SubRipTime
from PySubRip.version import __version__

def parse(text : str) -> SubRipData:
    """
    Parse SRT text into a :class:`SubRipData` document.

    Parameters
    ----------
    text : str
        The full content of an SRT file.

    Returns
    -------
    SubRipData
        The parsed subtitles. Unreadable fragments are merged, dropped or given zero values, never raised.
    """
    return SubRipParser().Parse(text)

def parse_with_anomalies(text : str) -> tuple[SubRipData, list[ParseAnomaly]]:
    """
    Parse SRT text and also return the list of recoveries made along the way.

    The document is identical to the one returned by :func:`parse`.
    """
    parser = SubRipParser()
    data = parser.Parse(text)
    return data, parser.anomalies

def serialize(data : SubRipData, settings : SettingsType|Mapping[str, SettingType]|None = None) -> str:
    """
    Compose a :class:`SubRipData` document as SRT text.

    Parameters
    ----------
    data : SubRipData
        The document to render. It is not modified.
    settings : SettingsType or mapping, optional
        Composer settings, e.g. `coordinate_tags` ('legacy', 'present' or 'never') and `line_ending`.

    Returns
    -------
    str
        SRT text with subtitles renumbered from 1.
    """
    return SubRipComposer(SettingsType(settings)).Compose(data)

__all__ = [
    '__version__',
    'parse',
    'parse_with_anomalies',
    'serialize',
    'AnomalyKind',
    'ParseAnomaly',
    'SettingsError',
    'SettingsType',
    'SubRipComposer',
    'SubRipCoordinates',
    'SubRipData',
    'SubRipError',
    'SubRipParseError',
    'SubRipParser',
    'SubRipSubtitle',
    'SubRipTime',
]
