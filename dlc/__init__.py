"""
Targets for the team batting second in weather affected limited overs matches,
using the Duckworth-Lewis Standard Edition.

The Professional Edition and Duckworth-Lewis-Stern tables are not published,
so results will not match international cricket.
"""
from dlc.engine import Overs, ResourceTable, DUCKWORTH_LEWIS_TABLE, CricketMatch, Grade, Innings, Interruption
from dlc.errors import (
    DuckworthLewisError, InvalidOverFormat, OversNotNumeric, TooManyBalls, InvalidState, MatchNotFound
)

__all__ = [
    "Overs",
    "ResourceTable",
    "DUCKWORTH_LEWIS_TABLE",
    "CricketMatch",
    "Grade",
    "Innings",
    "Interruption",
    "DuckworthLewisError",
    "InvalidOverFormat",
    "OversNotNumeric",
    "TooManyBalls",
    "InvalidState",
    "MatchNotFound",
]
