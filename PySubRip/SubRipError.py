class SubRipError(Exception):
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def __str__(self) -> str:
        if self.error:
            return f"{self.message} ({str(self.error)})" if self.message else str(self.error)
        return str(self.message or "")

class SubRipParseError(SubRipError):
    """
    Raised by the strict helpers when a value cannot be read as SubRip data.

    The document parser never raises this, it recovers instead.
    """
    pass
