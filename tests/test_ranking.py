"""Tests for rank arithmetic and snapshot bracketing."""
from datetime import timedelta

import pytest

from domain.enums import Division, Tier
from domain.ranking import bracket_snapshots, bracketed_delta, format_rank, lp_delta, scalar_rank

from factories import T0, snapshot


class TestScalarRank:

    @pytest.mark.parametrize("tier,division,points,expected", [
        ("IRON", "IV", 0, 0),
        ("SILVER", "II", 40, 1040),
        ("GOLD", "I", 99, 1599),
        ("EMERALD", "IV", 0, 2000),
        ("MASTER", "I", 50, 2850),
        ("GRANDMASTER", "", 0, 3200),
        ("CHALLENGER", "I", 1200, 4800),
    ])
    def test_values(self, tier, division, points, expected):
        assert scalar_rank(tier, division, points) == expected

    def test_accepts_enums(self):
        assert scalar_rank(Tier.PLATINUM, Division.III, 12) == 1600 + 100 + 12

    def test_division_ignored_above_diamond(self):
        assert scalar_rank("MASTER", "IV", 10) == scalar_rank("MASTER", "I", 10)

    def test_unknown_tier_raises(self):
        with pytest.raises(ValueError):
            scalar_rank("WOOD", "IV", 0)

    def test_monotonic_across_divisions(self):
        ladder = [
            scalar_rank(t.value, d.value, lp)
            for t in Tier if t.has_divisions
            for d in Division
            for lp in (0, 99)
        ]
        assert ladder == sorted(ladder)


class TestLpDelta:

    def test_same_division(self):
        before = snapshot(T0, "GOLD", "II", 40)
        after = snapshot(T0, "GOLD", "II", 61)
        assert lp_delta(before, after) == 21

    @pytest.mark.parametrize("tier,division,points", [
        ("IRON", "IV", 0), ("GOLD", "II", 55), ("CHALLENGER", "I", 1500),
    ])
    def test_snapshot_against_itself_is_zero(self, tier, division, points):
        s = snapshot(T0, tier, division, points)
        assert lp_delta(s, s) == 0

    def test_silver_two_to_silver_one(self):
        before = snapshot(T0, "SILVER", "II", 40)
        after = snapshot(T0, "SILVER", "I", 10)
        assert scalar_rank("SILVER", "I", 10) == 1110
        assert lp_delta(before, after) == 70

    def test_promotion_across_division(self):
        before = snapshot(T0, "GOLD", "II", 90)
        after = snapshot(T0, "GOLD", "I", 10)
        assert lp_delta(before, after) == 20

    def test_demotion_across_tier(self):
        before = snapshot(T0, "PLATINUM", "IV", 5)
        after = snapshot(T0, "GOLD", "I", 80)
        assert lp_delta(before, after) == -25


class TestBracketSnapshots:

    def test_picks_latest_before_and_earliest_after(self):
        start, end = T0, T0 + timedelta(minutes=30)
        rows = [
            snapshot(T0 + timedelta(minutes=45), lp=70, id=4),
            snapshot(T0 - timedelta(hours=2), lp=10, id=1),
            snapshot(T0 + timedelta(minutes=31), lp=60, id=3),
            snapshot(T0 - timedelta(minutes=5), lp=40, id=2),
        ]
        before, after = bracket_snapshots(rows, start, end)
        assert before.league_points == 40
        assert after.league_points == 60

    def test_ties_broken_by_id(self):
        rows = [snapshot(T0, lp=50, id=8), snapshot(T0, lp=45, id=7)]
        before, _ = bracket_snapshots(rows, T0, T0 + timedelta(minutes=30))
        assert before.id == 8

    def test_boundaries_inclusive(self):
        end = T0 + timedelta(minutes=30)
        rows = [snapshot(T0, lp=40, id=1), snapshot(end, lp=60, id=2)]
        assert bracketed_delta(rows, T0, end) == 20

    def test_missing_side_gives_none(self):
        rows = [snapshot(T0 - timedelta(minutes=1), id=1)]
        assert bracketed_delta(rows, T0, T0 + timedelta(minutes=30)) is None
        assert bracketed_delta([], T0, T0) is None


class TestFormatRank:

    def test_with_division(self):
        assert format_rank("GOLD", "II") == "Gold II"

    def test_master_and_above_drop_division(self):
        assert format_rank("MASTER", "I") == "Master"
        assert format_rank("GRANDMASTER", "I") == "Grandmaster"

    def test_unknown_tier_is_capitalized(self):
        assert format_rank("UNRANKED", "") == "Unranked"
