"""
Tests for the Standard Edition resource table.
"""
import pytest

from dlc.engine.overs import Overs
from dlc.engine.table import DUCKWORTH_LEWIS_TABLE, ResourceTable
from dlc.errors import InvalidState

table = DUCKWORTH_LEWIS_TABLE


class TestTableEntries:
    def test_table_covers_zero_to_fifty_overs(self):
        assert len(table) == 51
        assert table.max_overs == 50

    def test_full_innings_is_all_resources(self):
        assert table.resources_remaining(Overs(50), 0) == 100.0

    def test_published_values(self):
        """Spot checks against the published table"""
        assert table.resources_remaining(Overs(40), 0) == 89.3
        assert table.resources_remaining(Overs(30), 2) == 67.3
        assert table.resources_remaining(Overs(20), 4) == 44.6
        assert table.resources_remaining(Overs(10), 6) == 22.8
        assert table.resources_remaining(Overs(5), 8) == 9.4

    def test_whole_overs_use_exact_entry(self):
        for overs in range(0, 51):
            for wickets in range(10):
                assert table.resources_remaining(Overs(overs), wickets) == table.entry(overs, wickets)

    def test_no_overs_left_is_no_resources(self):
        for wickets in range(10):
            assert table.resources_remaining(Overs(0), wickets) == 0.0

    def test_ten_wickets_is_no_resources(self):
        assert table.resources_remaining(Overs(50), 10) == 0.0
        assert table.resources_remaining(Overs(20, 3), 11) == 0.0

    def test_negative_wickets_rejected(self):
        with pytest.raises(InvalidState):
            table.resources_remaining(Overs(20), -1)


class TestInterpolation:
    """Partial overs sit between the surrounding whole overs."""

    def test_partial_over_is_interpolated(self):
        lower = table.entry(7, 6)
        upper = table.entry(8, 6)
        assert table.resources_remaining(Overs(7, 4), 6) == pytest.approx(lower + (upper - lower) * 4 / 6)

    def test_partial_over_below_one(self):
        assert table.resources_remaining(Overs(0, 3), 0) == pytest.approx(table.entry(1, 0) / 2)

    def test_each_ball_moves_resources(self):
        previous = table.resources_remaining(Overs(12), 3)
        for balls in range(1, 6):
            current = table.resources_remaining(Overs(12, balls), 3)
            assert current > previous
            previous = current
        assert previous < table.resources_remaining(Overs(13), 3)

    def test_beyond_fifty_overs_reads_last_row(self):
        assert table.resources_remaining(Overs(50, 3), 0) == 100.0


class TestMonotonicity:
    def test_non_increasing_in_wickets(self):
        for overs in range(0, 51):
            for balls in (0, 3):
                if overs == 50 and balls:
                    continue
                values = [table.resources_remaining(Overs(overs, balls), w) for w in range(11)]
                assert values == sorted(values, reverse=True), f"{overs}.{balls} overs: {values}"

    def test_non_decreasing_in_overs(self):
        for wickets in range(10):
            values = [table.resources_remaining(Overs.from_balls(b), wickets) for b in range(0, 301)]
            assert values == sorted(values), f"{wickets} wickets"


class TestCustomTable:
    def test_rows_must_have_ten_wickets(self):
        with pytest.raises(InvalidState):
            ResourceTable([(0.0,) * 10, (1.0,) * 9])

    def test_from_published_adds_zero_row(self):
        custom = ResourceTable.from_published([(20.0,) * 10, (10.0,) * 10])
        assert custom.max_overs == 2
        assert custom.entry(0, 0) == 0.0
        assert custom.entry(1, 5) == 10.0
        assert custom.resources_remaining(Overs(1, 3), 0) == 15.0
