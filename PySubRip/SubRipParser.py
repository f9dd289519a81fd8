import logging

from PySubRip.Helpers.Parse import (
    IsSequenceNumber,
    MatchCoordinates,
    MatchTimeRange,
    SkipToFirstDigit,
    SplitBlocks,
    SplitLines,
    coordinate_tag,
)
from PySubRip.SubRipAnomaly import AnomalyKind, ParseAnomaly
from PySubRip.SubRipCoordinates import SubRipCoordinates
from PySubRip.SubRipData import SubRipData
from PySubRip.SubRipSubtitle import SubRipSubtitle
from PySubRip.SubRipTime import SubRipTime

class SubRipParser:
    """
    Permissive SRT parser.

    Malformed input never raises. A block without a sequence number is treated as more caption text
    for the previous subtitle (a caption containing a blank line is split into several blocks),
    and unreadable timing or coordinate tags fall back to zero values.

    Each recovery is recorded in `anomalies`, which is reset on every call to Parse.
    """
    def __init__(self):
        self.anomalies : list[ParseAnomaly] = []

    def Parse(self, text : str) -> SubRipData:
        """
        Parse SRT text into a SubRipData document
        """
        self.anomalies = []
        data = SubRipData()

        for block_number, block in enumerate(SplitBlocks(text), start=1):
            lines = SplitLines(block)

            number = lines[0]
            if block_number == 1:
                number = SkipToFirstDigit(number)
                if number != lines[0] and IsSequenceNumber(number):
                    self._add_anomaly(AnomalyKind.LeadingCharactersSkipped, block_number, lines[0])

            if not IsSequenceNumber(number):
                self._merge_continuation(data, block_number, lines)
                continue

            data.AddSubtitle(self._build_subtitle(block_number, int(number), lines))

        return data

    def _build_subtitle(self, block_number : int, number : int, lines : list[str]) -> SubRipSubtitle:
        if len(lines) < 2:
            self._add_anomaly(AnomalyKind.MissingTimeLine, block_number, lines[0])
            return SubRipSubtitle(number=number)

        time_line = lines[1]

        times = MatchTimeRange(time_line)
        if times is None:
            self._add_anomaly(AnomalyKind.InvalidTimeRange, block_number, time_line)
            times = (SubRipTime(), SubRipTime())

        coordinates = MatchCoordinates(time_line)
        if coordinates is None:
            if coordinate_tag in time_line:
                self._add_anomaly(AnomalyKind.InvalidCoordinates, block_number, time_line)
            coordinates = SubRipCoordinates()

        start_time, end_time = times
        return SubRipSubtitle(
            number=number,
            start_time=start_time,
            end_time=end_time,
            coordinates=coordinates,
            text="\n".join(lines[2:])
        )

    def _merge_continuation(self, data : SubRipData, block_number : int, lines : list[str]) -> None:
        previous = data.last
        if previous is None:
            self._add_anomaly(AnomalyKind.BlockDropped, block_number, lines[0])
            return

        self._add_anomaly(AnomalyKind.ContinuationMerged, block_number, lines[0])
        previous.AppendText("\n".join(lines))

    def _add_anomaly(self, kind : AnomalyKind, block_number : int, line : str) -> None:
        anomaly = ParseAnomaly(kind, block_number, line)
        logging.debug(str(anomaly))
        self.anomalies.append(anomaly)
