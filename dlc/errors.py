"""
Error taxonomy for the Duckworth-Lewis calculator.

Parse errors are recoverable and carry the offending value. InvalidState marks
a broken precondition (the caller should have validated its input first).
"""


class DuckworthLewisError(Exception):
    """Base class for every error raised by the calculator"""


class InvalidOverFormat(DuckworthLewisError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"overs must be in the format <overs>.<balls> got {value}")


class OversNotNumeric(DuckworthLewisError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"overs must be a non-negative whole number, got {value}")


class TooManyBalls(DuckworthLewisError, ValueError):
    def __init__(self, balls: int):
        self.value = balls
        super().__init__(f"balls must be less than 6, got {balls}")


class InvalidState(DuckworthLewisError):
    """A precondition of the core was violated"""


class MatchNotFound(DuckworthLewisError, LookupError):
    pass
