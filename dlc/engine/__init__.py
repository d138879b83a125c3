from dlc.engine.overs import Overs
from dlc.engine.table import ResourceTable, DUCKWORTH_LEWIS_TABLE
from dlc.engine.match import CricketMatch, Grade, Innings, Interruption

__all__ = [
    "Overs",
    "ResourceTable",
    "DUCKWORTH_LEWIS_TABLE",
    "CricketMatch",
    "Grade",
    "Innings",
    "Interruption",
]
