import regex

from PySubRip.SubRipCoordinates import SubRipCoordinates
from PySubRip.SubRipTime import SubRipTime

coordinate_tag = " X1:"

# Fields are limited to 18 digits, longer runs are treated as malformed
_number_pattern = regex.compile(r'[0-9]{1,18}')
_first_digit_pattern = regex.compile(r'[0-9]')
_time_range_pattern = regex.compile(
    r'([0-9]{1,18}):([0-9]{1,18}):([0-9]{1,18}),([0-9]{1,18}) --> '
    r'([0-9]{1,18}):([0-9]{1,18}):([0-9]{1,18}),([0-9]{1,18})(?![0-9])'
)
_coordinates_pattern = regex.compile(
    r' X1: *([0-9]{1,18}) X2: *([0-9]{1,18}) Y1: *([0-9]{1,18}) Y2: *([0-9]{1,18})(?![0-9])'
)

def SplitBlocks(text : str) -> list[str]:
    """
    Normalise line endings, trim the document and split it into blank-line separated blocks.

    Only a single blank line separates blocks, so extra blank lines produce empty blocks.
    """
    text = (text or "").replace("\r\n", "\n").replace("\r", "\n").strip()
    if not text:
        return []

    return text.split("\n\n")

def SplitLines(block : str) -> list[str]:
    """
    Split a block into its lines, ignoring surrounding whitespace
    """
    return block.strip().split("\n")

def IsSequenceNumber(text : str) -> bool:
    """
    True if the text is a non-empty run of ASCII decimal digits
    """
    return _number_pattern.fullmatch(text) is not None

def SkipToFirstDigit(text : str) -> str:
    """
    Discard everything before the first ASCII digit (e.g. a byte-order mark).
    Text without any digits is returned unchanged.
    """
    match = _first_digit_pattern.search(text)
    return text[match.start():] if match else text

def MatchTimeRange(line : str) -> tuple[SubRipTime, SubRipTime]|None:
    """
    Match 'H:MM:SS,mmm --> H:MM:SS,mmm' at the start of the line, ignoring anything after it.

    Fields are taken as-is without range checks. Returns None if the line does not match.
    """
    match = _time_range_pattern.match(line)
    if not match:
        return None

    sh, sm, ss, su, eh, em, es, eu = (int(group) for group in match.groups())
    return SubRipTime(sh, sm, ss, su), SubRipTime(eh, em, es, eu)

def MatchCoordinates(line : str) -> SubRipCoordinates|None:
    """
    Match the X1/X2/Y1/Y2 tags starting at the first ' X1:' in the line.

    Returns None if there is no tag or the tags are malformed.
    """
    start = line.find(coordinate_tag)
    if start < 0:
        return None

    match = _coordinates_pattern.match(line, start)
    if not match:
        return None

    x1, x2, y1, y2 = (int(group) for group in match.groups())
    return SubRipCoordinates(x1=x1, x2=x2, y1=y1, y2=y2)
