class SubRipCoordinates:
    """
    Screen box for a caption, from the X1/X2/Y1/Y2 tags on the timing line.

    All four fields at zero is the value used when no coordinates were given, so a caption
    genuinely positioned at the origin cannot be told apart from an unpositioned one.
    """
    __slots__ = ('x1', 'x2', 'y1', 'y2')

    def __init__(self, x1 : int = 0, x2 : int = 0, y1 : int = 0, y2 : int = 0):
        self.x1 : int = x1
        self.x2 : int = x2
        self.y1 : int = y1
        self.y2 : int = y2

    @property
    def is_zero(self) -> bool:
        return self.x1 == 0 and self.x2 == 0 and self.y1 == 0 and self.y2 == 0

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, SubRipCoordinates):
            return NotImplemented
        return (self.x1, self.x2, self.y1, self.y2) == (other.x1, other.x2, other.y1, other.y2)

    def __hash__(self) -> int:
        return hash((self.x1, self.x2, self.y1, self.y2))

    def __str__(self) -> str:
        return f"X1:{self.x1} X2:{self.x2} Y1:{self.y1} Y2:{self.y2}"

    def __repr__(self) -> str:
        return f"SubRipCoordinates(x1={self.x1}, x2={self.x2}, y1={self.y1}, y2={self.y2})"
