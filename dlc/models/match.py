"""
Stored matches. A row wraps the core match with an id, team names and a
creation time; interruptions are kept in the order they were recorded.
"""
from typing import List
from sqlalchemy import String, Integer, Float, ForeignKey, Enum, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
from dlc.database import Base
from dlc.engine.match import CricketMatch, Innings


class Match(Base):
    __tablename__ = "matches"

    id: Mapped[int] = mapped_column(primary_key=True)
    team_1: Mapped[str] = mapped_column(String(100), default="Team 1")
    team_2: Mapped[str] = mapped_column(String(100), default="Team 2")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Core match
    length: Mapped[str] = mapped_column(String(8))  # overs notation, e.g. "50" or "37.3"
    g_50: Mapped[float] = mapped_column(Float)

    interruptions: Mapped[List["Interruption"]] = relationship(
        "Interruption",
        back_populates="match",
        order_by="Interruption.sequence",
        cascade="all, delete-orphan",
    )

    def as_record(self) -> dict:
        return {
            "length": self.length,
            "g_50": self.g_50,
            "interruptions": [i.as_record() for i in self.interruptions],
        }

    def to_game(self) -> CricketMatch:
        return CricketMatch.from_dict(self.as_record())

    def __repr__(self):
        return f"<Match {self.id}: {self.team_1} vs {self.team_2}>"


class Interruption(Base):
    __tablename__ = "interruptions"

    id: Mapped[int] = mapped_column(primary_key=True)
    match_id: Mapped[int] = mapped_column(ForeignKey("matches.id", ondelete="CASCADE"))
    match: Mapped["Match"] = relationship("Match", back_populates="interruptions")

    sequence: Mapped[int] = mapped_column(Integer)  # Order recorded within the match

    wickets: Mapped[int] = mapped_column(Integer)
    overs_left: Mapped[str] = mapped_column(String(8))
    overs_lost: Mapped[str] = mapped_column(String(8))
    innings: Mapped[Innings] = mapped_column(Enum(Innings))

    def as_record(self) -> dict:
        return {
            "wickets": self.wickets,
            "overs_left": self.overs_left,
            "overs_lost": self.overs_lost,
            "innings": self.innings.value,
        }

    def __repr__(self):
        return f"<Interruption {self.innings.value} innings: {self.wickets} wkts, {self.overs_left} left, {self.overs_lost} lost>"
