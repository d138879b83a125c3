"""
Match Engine - folds rain interruptions into a revised second innings target
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from dlc.engine.overs import Overs
from dlc.engine.table import DUCKWORTH_LEWIS_TABLE, WICKETS, ResourceTable
from dlc.errors import InvalidState

logger = logging.getLogger(__name__)

MAX_OVERS = 50
G50_FULL = 245.0
G50_OTHER = 200.0


class Grade(str, enum.Enum):
    """
    Highest grade the teams are eligible to play (not the grade of this
    particular match). Sets the G50, the runs expected in an average innings.
    """
    ICC_FULL_MEMBER = "icc_full_member"
    FIRST_CLASS = "first_class"
    U19_INTERNATIONAL = "u19_international"
    U15_INTERNATIONAL = "u15_international"
    WOMENS_INTERNATIONAL = "womens_international"
    ICC_ASSOCIATE_MEMBER = "icc_associate_member"

    @property
    def g_50(self) -> float:
        if self in (Grade.ICC_FULL_MEMBER, Grade.FIRST_CLASS):
            return G50_FULL
        return G50_OTHER


class Innings(str, enum.Enum):
    FIRST = "first"
    SECOND = "second"


@dataclass(frozen=True)
class Interruption:
    """
    A single stoppage. overs_left is as at suspension (after earlier
    deductions, before this one); overs_lost is what this innings loses.
    """
    wickets: int
    overs_left: Overs
    overs_lost: Overs
    innings: Innings

    def resource_loss(self, table: ResourceTable = DUCKWORTH_LEWIS_TABLE) -> float:
        at_suspension = table.resources_remaining(self.overs_left, self.wickets)
        at_resumption = table.resources_remaining(self.overs_left - self.overs_lost, self.wickets)
        return at_suspension - at_resumption

    def to_dict(self) -> dict:
        return {
            "wickets": self.wickets,
            "overs_left": str(self.overs_left),
            "overs_lost": str(self.overs_lost),
            "innings": self.innings.value,
        }


@dataclass
class CricketMatch:
    """
    Length, G50 and interruptions of a limited overs match.

    Only recording an interruption changes a match. revised_target() is a pure
    read, so it can be recalculated as further interruptions come in.
    """
    length: Overs
    g_50: float
    interruptions: List[Interruption] = field(default_factory=list)
    table: ResourceTable = field(default=DUCKWORTH_LEWIS_TABLE, repr=False, compare=False)

    def __post_init__(self):
        if self.length.overs > MAX_OVERS:
            raise InvalidState(f"match length must be at most {MAX_OVERS} overs, got {self.length}")

    @classmethod
    def new(cls, length: Overs, grade: Grade) -> "CricketMatch":
        """
        Create a match for the given grade. Only the Standard Edition is
        implemented, so targets will differ from the Duckworth-Lewis-Stern
        figures used in international cricket.
        """
        return cls(length, grade.g_50)

    @classmethod
    def new_with_g_50(cls, length: Overs, g_50: float) -> "CricketMatch":
        """Create a match with a custom G50 instead of the ICC standard one"""
        return cls(length, float(g_50))

    def record_interruption(self, wickets: int, overs_left: Overs, overs_lost: Overs, innings: Innings) -> Interruption:
        """
        Record a stoppage. Wickets are those lost in the innings so far.

        Raises InvalidState if wickets is not 0-9 or overs_left is longer than
        the match.
        """
        if not 0 <= wickets < WICKETS:
            raise InvalidState(f"wickets must be between 0 and {WICKETS - 1}, got {wickets}")
        if overs_left > self.length:
            raise InvalidState(f"overs left ({overs_left}) cannot exceed match length ({self.length})")

        interruption = Interruption(wickets, overs_left, overs_lost, Innings(innings))
        self.interruptions.append(interruption)
        logger.debug("Recorded %s innings interruption: %s", interruption.innings.value, interruption)
        return interruption

    def initial_resources(self) -> float:
        return self.table.resources_remaining(self.length, 0)

    def _innings_interruptions(self, innings: Innings) -> List[Interruption]:
        return [i for i in self.interruptions if i.innings == innings]

    def first_innings_resources(self) -> Tuple[float, Overs]:
        """Resources team 1 had and the overs left over for team 2"""
        resources, overs = self.initial_resources(), self.length
        for interruption in self._innings_interruptions(Innings.FIRST):
            resources -= interruption.resource_loss(self.table)
            overs = overs - interruption.overs_lost
        return resources, overs

    def second_innings_resources(self, total_overs: Overs) -> float:
        resources = self.table.resources_remaining(total_overs, 0)
        for interruption in self._innings_interruptions(Innings.SECOND):
            resources -= interruption.resource_loss(self.table)
        return resources

    def revised_target(self, first_innings_total: int) -> int:
        """
        The total team 2 needs at the end of its innings (the target, not the
        par score). Returns 0 while no interruptions have been recorded.

        With equal resources the first innings total is returned unchanged,
        without the +1 applied in the other two cases.
        """
        if not self.interruptions:
            return 0

        t1_resources, total_overs = self.first_innings_resources()
        t2_resources = self.second_innings_resources(total_overs)

        if t2_resources < t1_resources:
            if t1_resources <= 0:
                raise InvalidState("team 1 has no resources left to scale the target by")
            target = first_innings_total * t2_resources / t1_resources + 1
        elif t2_resources > t1_resources:
            target = first_innings_total + (t2_resources - t1_resources) * self.g_50 / 100 + 1
        else:
            target = first_innings_total

        logger.debug(
            "Team 1 resources %.3f, team 2 resources %.3f over %s overs, target %s",
            t1_resources, t2_resources, total_overs, int(target),
        )
        return int(target)

    def to_dict(self) -> dict:
        return {
            "length": str(self.length),
            "g_50": self.g_50,
            "interruptions": [i.to_dict() for i in self.interruptions],
        }

    @classmethod
    def from_dict(cls, data: dict, table: Optional[ResourceTable] = None) -> "CricketMatch":
        """Rebuild a match, re-checking every interruption on the way in"""
        game = cls(Overs.parse(str(data["length"])), float(data["g_50"]), table=table or DUCKWORTH_LEWIS_TABLE)
        for item in data.get("interruptions", []):
            game.record_interruption(
                int(item["wickets"]),
                Overs.parse(str(item["overs_left"])),
                Overs.parse(str(item["overs_lost"])),
                Innings(item["innings"]),
            )
        return game
