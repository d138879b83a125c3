from dlc.models.match import Match, Interruption

__all__ = [
    "Match",
    "Interruption",
]
