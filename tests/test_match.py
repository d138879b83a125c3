"""
Tests for revised targets, based on the ICC worked examples:
https://icc-static-files.s3.amazonaws.com/ICC/document/2017/01/09/ca50a5e9-0241-494a-8773-d0cec059b31f/DuckworthLewis-Methodology.pdf
"""
import pytest

from dlc.engine.match import CricketMatch, Grade, Innings, Interruption
from dlc.engine.overs import Overs
from dlc.engine.table import DUCKWORTH_LEWIS_TABLE
from dlc.errors import InvalidState, TooManyBalls


class TestIccExamples:
    def test_icc_example_one(self):
        """First innings stoppage, team 2 gets more resources"""
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        game.record_interruption(3, Overs(30), Overs(10), Innings.FIRST)
        assert game.revised_target(180) == 185

    def test_icc_example_two(self):
        """Delayed start to the second innings"""
        game = CricketMatch.new(Overs(45), Grade.ICC_FULL_MEMBER)
        game.record_interruption(0, Overs(45), Overs(10), Innings.SECOND)
        assert game.revised_target(212) == 185

    def test_icc_example_three(self):
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        game.record_interruption(1, Overs(38), Overs(10), Innings.SECOND)
        assert game.revised_target(250) == 218

    def test_icc_example_four(self):
        """
        Three second innings stoppages, the last one ending the match. This is
        the target (160), not the par score of the ICC example (159).
        """
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        game.record_interruption(1, Overs(38), Overs(10), Innings.SECOND)
        game.record_interruption(3, Overs(18), Overs(2), Innings.SECOND)
        game.record_interruption(6, Overs.from_decimal(7.4), Overs.from_decimal(7.4), Innings.SECOND)
        assert game.revised_target(250) == 160


class TestRevisedTarget:
    def test_no_interruptions_returns_zero(self):
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        for total in [0, 1, 180, 400]:
            assert game.revised_target(total) == 0

    def test_equal_resources_returns_total_without_margin(self):
        """A stoppage that costs nothing leaves the target at the first innings total"""
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        game.record_interruption(2, Overs(20), Overs(0), Innings.SECOND)
        assert game.revised_target(250) == 250

    def test_target_is_truncated(self):
        game = CricketMatch.new(Overs(45), Grade.ICC_FULL_MEMBER)
        game.record_interruption(0, Overs(45), Overs(10), Innings.SECOND)
        # 212 * 82.7 / 95.0 + 1 = 185.55
        assert game.revised_target(212) == 185

    def test_grade_sets_surplus_value(self):
        full = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        other = CricketMatch.new(Overs(50), Grade.ICC_ASSOCIATE_MEMBER)
        for game in (full, other):
            game.record_interruption(3, Overs(30), Overs(10), Innings.FIRST)
        # surplus of 1.8% resources: 4.41 runs at G50 245, 3.6 at G50 200
        assert full.revised_target(180) == 185
        assert other.revised_target(180) == 184

    def test_custom_g_50(self):
        game = CricketMatch.new_with_g_50(Overs(50), 300)
        game.record_interruption(3, Overs(30), Overs(10), Innings.FIRST)
        assert game.g_50 == 300.0
        # 180 + 1.8 * 3 + 1 = 186.4
        assert game.revised_target(180) == 186

    def test_target_can_be_recalculated(self):
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        game.record_interruption(1, Overs(38), Overs(10), Innings.SECOND)
        assert game.revised_target(250) == 218
        assert game.revised_target(250) == 218

        game.record_interruption(3, Overs(18), Overs(2), Innings.SECOND)
        assert game.revised_target(250) < 218
        assert len(game.interruptions) == 2

    def test_second_innings_stoppage_does_not_reduce_first_innings_overs(self):
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        game.record_interruption(1, Overs(38), Overs(10), Innings.SECOND)
        resources, overs = game.first_innings_resources()
        assert resources == 100.0
        assert overs == Overs(50)

    def test_first_innings_stoppages_reduce_team_two_overs(self):
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        game.record_interruption(2, Overs(30), Overs(5), Innings.FIRST)
        game.record_interruption(4, Overs(15), Overs(3, 3), Innings.FIRST)
        _, overs = game.first_innings_resources()
        assert overs == Overs(41, 3)


class TestInterruption:
    def test_resource_loss(self):
        interruption = Interruption(3, Overs(30), Overs(10), Innings.FIRST)
        assert interruption.resource_loss() == pytest.approx(61.6 - 49.1)

    def test_losing_every_over_left_costs_all_remaining(self):
        interruption = Interruption(6, Overs(7, 4), Overs(7, 4), Innings.SECOND)
        assert interruption.resource_loss() == pytest.approx(
            DUCKWORTH_LEWIS_TABLE.resources_remaining(Overs(7, 4), 6)
        )

    def test_losing_more_than_left_is_clamped(self):
        clamped = Interruption(6, Overs(7, 4), Overs(12), Innings.SECOND)
        exact = Interruption(6, Overs(7, 4), Overs(7, 4), Innings.SECOND)
        assert clamped.resource_loss() == exact.resource_loss()


class TestContract:
    def test_match_longer_than_fifty_overs(self):
        with pytest.raises(InvalidState):
            CricketMatch.new(Overs(51), Grade.FIRST_CLASS)

    def test_fifty_overs_allowed(self):
        assert CricketMatch.new(Overs(50), Grade.FIRST_CLASS).length == Overs(50)

    def test_ten_wickets_rejected(self):
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        with pytest.raises(InvalidState):
            game.record_interruption(10, Overs(10), Overs(5), Innings.SECOND)
        assert game.interruptions == []

    def test_overs_left_beyond_length_rejected(self):
        game = CricketMatch.new(Overs(45), Grade.ICC_FULL_MEMBER)
        with pytest.raises(InvalidState):
            game.record_interruption(0, Overs(45, 1), Overs(5), Innings.FIRST)

    def test_fractional_whole_overs_never_reach_the_match(self):
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        with pytest.raises(InvalidState):
            game.record_interruption(3, Overs.from_whole(30.5), Overs(10), Innings.FIRST)
        assert game.interruptions == []
        assert game.revised_target(180) == 0


class TestGrade:
    def test_g_50_values(self):
        assert Grade.ICC_FULL_MEMBER.g_50 == 245.0
        assert Grade.FIRST_CLASS.g_50 == 245.0
        for grade in [Grade.U19_INTERNATIONAL, Grade.U15_INTERNATIONAL,
                      Grade.WOMENS_INTERNATIONAL, Grade.ICC_ASSOCIATE_MEMBER]:
            assert grade.g_50 == 200.0


class TestSerialisation:
    def test_to_dict(self):
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        game.record_interruption(6, Overs(7, 4), Overs(7, 4), Innings.SECOND)
        assert game.to_dict() == {
            "length": "50",
            "g_50": 245.0,
            "interruptions": [
                {"wickets": 6, "overs_left": "7.4", "overs_lost": "7.4", "innings": "second"},
            ],
        }

    def test_from_dict_keeps_order_and_target(self):
        game = CricketMatch.new(Overs(50), Grade.ICC_FULL_MEMBER)
        game.record_interruption(1, Overs(38), Overs(10), Innings.SECOND)
        game.record_interruption(3, Overs(18), Overs(2), Innings.SECOND)
        game.record_interruption(6, Overs(7, 4), Overs(7, 4), Innings.SECOND)

        restored = CricketMatch.from_dict(game.to_dict())
        assert restored == game
        assert restored.revised_target(250) == 160

    def test_from_dict_rechecks_contract(self):
        data = {
            "length": "40",
            "g_50": 245.0,
            "interruptions": [{"wickets": 2, "overs_left": "45", "overs_lost": "5", "innings": "first"}],
        }
        with pytest.raises(InvalidState):
            CricketMatch.from_dict(data)

    def test_from_dict_rejects_bad_overs(self):
        with pytest.raises(TooManyBalls):
            CricketMatch.from_dict({"length": "49.6", "g_50": 245.0, "interruptions": []})
