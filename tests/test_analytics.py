import pytest

from analytics.stats import (
    score_type_distribution,
    scoring_by_par,
    summarize,
    summary_display,
)
from models import HoleRecord, Round, RoundSummary


def _round_with(*played: HoleRecord) -> Round:
    """Fresh round with the given holes dropped into their slots."""
    holes = list(Round.new().holes)
    for hole in played:
        holes[hole.hole_number - 1] = hole
    return Round(holes=holes)


def _build_round() -> Round:
    return _round_with(
        HoleRecord(hole_number=1, par=4, score_to_par=0, fairway_hit=True,
                   green_in_regulation=True, putts=2),
        HoleRecord(hole_number=2, par=3, score_to_par=1, green_in_regulation=False,
                   up_and_down=False, putts=2),
        HoleRecord(hole_number=3, par=5, score_to_par=-1, fairway_hit=False,
                   green_in_regulation=False, up_and_down=True, putts=1),
        HoleRecord(hole_number=4, par=4, score_to_par=2, fairway_hit=False,
                   green_in_regulation=False, up_and_down=False, putts=3),
    )


def test_summarize_empty_round():
    summary = summarize(Round.new())

    assert summary.holes_played == 0
    assert summary.total_strokes == 0
    assert summary.fairway_percentage == 0
    assert summary.gir_percentage == 0
    assert summary.up_and_down_percentage == 0
    assert summary.putts_per_hole == 0
    assert summary == RoundSummary()


def test_summarize_mixed_round():
    summary = summarize(_build_round())

    assert summary.holes_played == 4
    assert summary.total_par == 16
    assert summary.score_to_par == 2
    assert summary.total_strokes == 18

    assert summary.fairways_possible == 3     # hole 2 is a par 3
    assert summary.fairways_hit == 1
    assert summary.fairway_percentage == 33

    assert summary.greens_possible == 4
    assert summary.greens_hit == 1
    assert summary.gir_percentage == 25

    assert summary.up_and_down_attempts == 3  # hole 1 hit the green
    assert summary.up_and_downs_converted == 1
    assert summary.up_and_down_percentage == 33

    assert summary.total_putts == 8
    assert summary.putts_per_hole == 2.0


def test_total_strokes_is_par_plus_score_to_par():
    for r in (Round.new(), _build_round()):
        summary = summarize(r)
        assert summary.total_strokes == summary.total_par + summary.score_to_par


def test_unplayed_holes_are_excluded():
    # Hole 5 has data but no GIR entry, so it does not count anywhere
    r = _build_round().with_hole_update(5, "score_to_par", 4).with_hole_update(5, "putts", 4)
    assert summarize(r) == summarize(_build_round())


def test_single_birdie_with_gir():
    r = _round_with(
        HoleRecord(hole_number=1, par=4, score_to_par=-1, fairway_hit=True,
                   green_in_regulation=True, putts=3)
    )
    summary = summarize(r)

    assert summary.total_strokes == 3
    assert summary.score_to_par == -1
    assert summary.fairway_percentage == 100
    assert summary.gir_percentage == 100
    assert summary.up_and_down_attempts == 0
    assert summary.up_and_down_percentage == 0
    assert summary.putts_per_hole == 3.0


def test_par_three_scrambling_save():
    r = _round_with(
        HoleRecord(hole_number=1, par=3, score_to_par=1, green_in_regulation=False,
                   up_and_down=True, putts=2)
    )
    summary = summarize(r)

    assert summary.fairways_possible == 0
    assert summary.fairway_percentage == 0
    assert summary.up_and_down_attempts == 1
    assert summary.up_and_downs_converted == 1
    assert summary.up_and_down_percentage == 100


def test_par_three_never_counts_fairway():
    # fairway_hit recorded on a par 3 (loaded as-is) still does not count
    r = _round_with(
        HoleRecord(hole_number=1, par=3, fairway_hit=True, green_in_regulation=True)
    )
    summary = summarize(r)
    assert summary.fairways_possible == 0
    assert summary.fairways_hit == 0


def test_gir_hole_never_counts_up_and_down():
    r = _round_with(
        HoleRecord(hole_number=1, green_in_regulation=True, up_and_down=True)
    )
    summary = summarize(r)
    assert summary.up_and_down_attempts == 0
    assert summary.up_and_downs_converted == 0


def test_percentages_round_half_up():
    # 1 of 8 greens = 12.5% -> 13; 9 putts over 4 holes = 2.25 -> 2.3
    played = [
        HoleRecord(hole_number=i, green_in_regulation=(i == 1), putts=0)
        for i in range(1, 9)
    ]
    summary = summarize(_round_with(*played))
    assert summary.gir_percentage == 13

    played = [
        HoleRecord(hole_number=i, green_in_regulation=False, putts=p)
        for i, p in zip(range(1, 5), [3, 2, 2, 2])
    ]
    summary = summarize(_round_with(*played))
    assert summary.putts_per_hole == pytest.approx(2.3)


def test_summary_display():
    display = summary_display(summarize(_build_round()))

    assert display["score_to_par"] == "+2"
    assert display["strokes"] == "18 strokes (Par 16)"
    assert display["fairways"] == "1/3"
    assert display["greens"] == "1/4"
    assert display["up_and_downs"] == "1/3"
    assert display["putts"] == "8 total"

    assert summary_display(summarize(Round.new()))["score_to_par"] == "E"


def test_scoring_by_par():
    rows = scoring_by_par(_build_round())
    by_par = {row["par"]: row for row in rows}

    assert set(by_par.keys()) == {3, 4, 5}
    assert by_par[4]["sample_size"] == 2
    assert by_par[4]["average_to_par"] == pytest.approx(1.0)
    assert by_par[4]["average_strokes"] == pytest.approx(5.0)
    assert by_par[5]["average_strokes"] == pytest.approx(4.0)

    assert scoring_by_par(Round.new()) == []


def test_score_type_distribution():
    row = score_type_distribution(_build_round())

    assert row["holes_counted"] == 4
    assert row["Par"] == pytest.approx(25.0)
    assert row["Bogey"] == pytest.approx(25.0)
    assert row["Birdie"] == pytest.approx(25.0)
    assert row["Double"] == pytest.approx(25.0)
    assert row["Eagle"] == 0.0

    empty = score_type_distribution(Round.new())
    assert empty["holes_counted"] == 0
    assert empty["Par"] == 0.0
