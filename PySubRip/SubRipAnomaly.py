from enum import Enum

class AnomalyKind(Enum):
    LeadingCharactersSkipped = 1
    ContinuationMerged = 2
    BlockDropped = 3
    MissingTimeLine = 4
    InvalidTimeRange = 5
    InvalidCoordinates = 6

class ParseAnomaly:
    """
    Record of a recovery the parser made while reading malformed input.

    Attributes:
        kind (AnomalyKind): what was recovered
        block_number (int): 1-based position of the block in the source
        line (str): the offending line (or first line of the offending block)
    """
    def __init__(self, kind : AnomalyKind, block_number : int, line : str = ""):
        self.kind : AnomalyKind = kind
        self.block_number : int = block_number
        self.line : str = line

    @property
    def description(self) -> str:
        descriptions = {
            AnomalyKind.LeadingCharactersSkipped: "Skipped leading characters before the first sequence number",
            AnomalyKind.ContinuationMerged: "Block has no sequence number, merged into the previous subtitle",
            AnomalyKind.BlockDropped: "Block has no sequence number and no previous subtitle, dropped",
            AnomalyKind.MissingTimeLine: "Subtitle has no timing line, times set to zero",
            AnomalyKind.InvalidTimeRange: "Timing line could not be parsed, times set to zero",
            AnomalyKind.InvalidCoordinates: "Coordinate tags could not be parsed, coordinates set to zero",
        }
        return descriptions[self.kind]

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, ParseAnomaly):
            return NotImplemented
        return (self.kind, self.block_number, self.line) == (other.kind, other.block_number, other.line)

    __hash__ = None # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Block {self.block_number}: {self.description}: {repr(self.line)}"

    def __repr__(self) -> str:
        return f"ParseAnomaly({self.kind.name}, block_number={self.block_number}, line={repr(self.line)})"
