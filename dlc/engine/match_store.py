"""
Match Store - keeps matches by id so interruptions can be added over the
course of a match and the target recalculated at any point
"""
import logging
from typing import Iterable, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from dlc.engine.match import CricketMatch, Grade, Innings
from dlc.engine.overs import Overs
from dlc.errors import MatchNotFound
from dlc.models.match import Match, Interruption

logger = logging.getLogger(__name__)


class MatchStore:
    """
    Stores matches in the database. Every change goes through the core match
    first, so nothing that breaks its rules is ever written.
    """

    def __init__(self, session: Session):
        self.session = session

    def create(
        self,
        length: Overs,
        grade: Optional[Grade] = None,
        g_50: Optional[float] = None,
        team_1: str = "Team 1",
        team_2: str = "Team 2",
    ) -> Match:
        """Create a match from a grade, or from an explicit G50 when one is given"""
        if g_50 is not None:
            game = CricketMatch.new_with_g_50(length, g_50)
        else:
            game = CricketMatch.new(length, grade or Grade.ICC_FULL_MEMBER)

        next_id = (self.session.query(func.max(Match.id)).scalar() or 0) + 1
        match = Match(
            id=next_id,
            team_1=team_1,
            team_2=team_2,
            length=str(game.length),
            g_50=game.g_50,
        )
        self.session.add(match)
        self.session.commit()
        logger.info("Created match %s: %s vs %s (%s overs, G50 %s)", match.id, team_1, team_2, match.length, match.g_50)
        return match

    def get(self, match_id: Optional[int] = None) -> Match:
        """Fetch a match by id, or the most recently created one"""
        if match_id is not None:
            match = self.session.get(Match, match_id)
            if match is None:
                raise MatchNotFound(f"match with id {match_id} not found")
            return match

        match = (
            self.session.query(Match)
            .order_by(Match.created_at.desc(), Match.id.desc())
            .first()
        )
        if match is None:
            raise MatchNotFound("no matches created yet")
        return match

    def record_interruption(
        self,
        match: Match,
        wickets: int,
        overs_left: Overs,
        overs_lost: Overs,
        innings: Innings,
    ) -> Interruption:
        game = match.to_game()
        recorded = game.record_interruption(wickets, overs_left, overs_lost, innings)

        row = Interruption(
            sequence=len(match.interruptions) + 1,
            wickets=recorded.wickets,
            overs_left=str(recorded.overs_left),
            overs_lost=str(recorded.overs_lost),
            innings=recorded.innings,
        )
        match.interruptions.append(row)
        self.session.commit()
        logger.info(
            "Match %s: %s innings interruption at %s wickets, %s overs left, %s lost",
            match.id, recorded.innings.value, wickets, overs_left, overs_lost,
        )
        return row

    def revised_target(self, match: Match, first_innings_total: int) -> int:
        return match.to_game().revised_target(first_innings_total)

    def list(self) -> List[Match]:
        return self.session.query(Match).order_by(Match.id).all()

    def delete(self, match_ids: Iterable[int]) -> int:
        """Delete matches by id; unknown ids are ignored. Returns how many went."""
        ids = set(match_ids)
        if not ids:
            return 0
        matches = self.session.query(Match).filter(Match.id.in_(ids)).all()
        for match in matches:
            self.session.delete(match)
        self.session.commit()
        logger.info("Deleted %d match(es): %s", len(matches), sorted(m.id for m in matches))
        return len(matches)
