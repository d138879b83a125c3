from dlc.engine.match import CricketMatch, MAX_OVERS
from dlc.engine.overs import Overs
from dlc.engine.table import WICKETS


class InterruptionValidator:
    @staticmethod
    def validate_length(length: Overs) -> dict:
        """A match can be at most 50 overs a side"""
        errors = []
        if length.overs > MAX_OVERS:
            errors.append(f"Match length must be at most {MAX_OVERS} overs, got {length}")
        return {"valid": len(errors) == 0, "errors": errors}

    @staticmethod
    def validate(game: CricketMatch, wickets: int, overs_left: Overs, overs_lost: Overs) -> dict:
        """
        Validate an interruption before it is recorded.

        Rules:
        1. Wickets lost between 0 and 9 (at 10 the innings is over)
        2. Overs left no longer than the match

        Losing more overs than are left is allowed; the innings just resumes
        with none.
        """
        errors = []

        if not 0 <= wickets < WICKETS:
            errors.append(f"Wickets must be between 0 and {WICKETS - 1}, got {wickets}")

        if overs_left > game.length:
            errors.append(f"Overs left ({overs_left}) cannot exceed the match length ({game.length})")

        return {
            "valid": len(errors) == 0,
            "errors": errors,
            "resumes_with": str(overs_left - overs_lost),
        }
