"""
Over arithmetic. Overs are written <overs>.<balls> with 0-5 balls, so 37.3
means 37 overs and 3 balls (not 37.3 decimal overs).
"""
import re
from dataclasses import dataclass
from decimal import Decimal

from dlc.errors import InvalidOverFormat, OversNotNumeric, TooManyBalls, InvalidState

BALLS_PER_OVER = 6

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True, order=True)
class Overs:
    """
    A length of overs, whole or partial.

    Ordering follows total balls. Subtraction saturates at zero. Build partial
    overs with parse() or from_decimal(); Overs(n) is a whole number of overs.
    """
    overs: int
    balls: int = 0

    def __post_init__(self):
        for name in ("overs", "balls"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidState(f"{name} must be a whole number, got {value!r}")
        if self.overs < 0:
            raise InvalidState(f"overs must be non-negative, got {self.overs}")
        if not 0 <= self.balls < BALLS_PER_OVER:
            raise TooManyBalls(self.balls)

    @classmethod
    def from_whole(cls, overs: int) -> "Overs":
        return cls(overs)

    @classmethod
    def from_balls(cls, balls: int) -> "Overs":
        overs, balls = divmod(max(0, balls), BALLS_PER_OVER)
        return cls(overs, balls)

    @classmethod
    def parse(cls, text: str) -> "Overs":
        """
        Parse "50" or "37.3".

        Raises InvalidOverFormat for anything that is not <overs> or
        <overs>.<balls>, OversNotNumeric when a side is not a whole number and
        TooManyBalls when the ball count is 6 or more.
        """
        if _DIGITS.fullmatch(text):
            return cls(int(text))

        parts = text.split(".")
        if len(parts) != 2:
            raise InvalidOverFormat(text)

        overs_part, balls_part = parts
        if not _DIGITS.fullmatch(overs_part) or not _DIGITS.fullmatch(balls_part):
            raise OversNotNumeric(text)

        balls = int(balls_part)
        if balls >= BALLS_PER_OVER:
            raise TooManyBalls(balls)
        return cls(int(overs_part), balls)

    @classmethod
    def from_decimal(cls, value: float) -> "Overs":
        """
        Convert 37.3 (a float) to 37 overs 3 balls. Only the first digit after
        the point counts: 37.37 becomes 37.3, while 37.6 is still rejected.
        """
        if value == 0:
            return cls(0)
        # Positional text, never 1e-05
        text = format(Decimal(repr(value)), "f")
        point = text.find(".")
        if point != -1:
            text = text[:point + 2]
        return cls.parse(text)

    @property
    def total_balls(self) -> int:
        return self.overs * BALLS_PER_OVER + self.balls

    def __sub__(self, other: "Overs") -> "Overs":
        if not isinstance(other, Overs):
            return NotImplemented
        return Overs.from_balls(self.total_balls - other.total_balls)

    def __str__(self) -> str:
        if self.balls == 0:
            return str(self.overs)
        return f"{self.overs}.{self.balls}"
