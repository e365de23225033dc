from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List

from models.hole_record import format_to_par, score_label
from models.round import Round
from models.summary import RoundSummary

SCORE_TYPE_ORDER = [
    "Albatross",
    "Eagle",
    "Birdie",
    "Par",
    "Bogey",
    "Double",
    "Triple",
    "Bogey+",
]


def _percentage(hit: int, possible: int) -> int:
    """Whole-number percentage, halves rounded up; 0 when nothing was possible."""
    if possible <= 0:
        return 0
    return int((Decimal(hit) * 100 / Decimal(possible)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _per_hole_average(total: int, holes_played: int) -> float:
    if holes_played <= 0:
        return 0
    average = Decimal(total) / Decimal(holes_played)
    return float(average.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def summarize(round_obj: Round) -> RoundSummary:
    """
    Compute summary metrics over the played holes of a round.

    Unplayed holes (GIR not yet recorded) are left out of every metric,
    strokes and par included. Par 3s never count toward fairways and a
    hole that hit the green in regulation never counts as an up-and-down
    attempt, whatever those fields hold.
    """
    holes_played = 0
    total_par = 0
    total_to_par = 0
    fairways_hit = fairways_possible = 0
    greens_hit = greens_possible = 0
    converted = attempts = 0
    total_putts = 0

    for hole in round_obj.played_holes():
        holes_played += 1
        total_par += hole.par
        total_to_par += hole.score_to_par

        greens_possible += 1
        if hole.green_in_regulation:
            greens_hit += 1

        if hole.par > 3:
            fairways_possible += 1
            if hole.fairway_hit:
                fairways_hit += 1

        if not hole.green_in_regulation:
            attempts += 1
            if hole.up_and_down:
                converted += 1

        total_putts += hole.putts

    return RoundSummary(
        holes_played=holes_played,
        total_strokes=total_par + total_to_par,
        total_par=total_par,
        score_to_par=total_to_par,
        fairways_hit=fairways_hit,
        fairways_possible=fairways_possible,
        fairway_percentage=_percentage(fairways_hit, fairways_possible),
        greens_hit=greens_hit,
        greens_possible=greens_possible,
        gir_percentage=_percentage(greens_hit, greens_possible),
        up_and_downs_converted=converted,
        up_and_down_attempts=attempts,
        up_and_down_percentage=_percentage(converted, attempts),
        total_putts=total_putts,
        putts_per_hole=_per_hole_average(total_putts, holes_played),
    )


def summary_display(summary: RoundSummary) -> Dict[str, str]:
    """Strings the summary screen shows next to the numbers."""
    return {
        "score_to_par": format_to_par(summary.score_to_par),
        "strokes": f"{summary.total_strokes} strokes (Par {summary.total_par})",
        "fairways": f"{summary.fairways_hit}/{summary.fairways_possible}",
        "greens": f"{summary.greens_hit}/{summary.greens_possible}",
        "up_and_downs": f"{summary.up_and_downs_converted}/{summary.up_and_down_attempts}",
        "putts": f"{summary.total_putts} total",
    }


def scoring_by_par(round_obj: Round) -> List[Dict[str, Any]]:
    """
    Aggregate scoring performance by hole par (3, 4, 5) over played holes.

    Output rows:
    - par: 3, 4, or 5
    - average_to_par: mean(score_to_par)
    - average_strokes: mean(par + score_to_par)
    - sample_size: number of holes included
    """
    by_par: Dict[int, List[int]] = {}
    for hole in round_obj.played_holes():
        by_par.setdefault(hole.par, []).append(hole.score_to_par)

    results: List[Dict[str, Any]] = []
    for par in sorted(by_par):
        values = by_par[par]
        average_to_par = sum(values) / len(values)
        results.append(
            {
                "par": par,
                "average_to_par": average_to_par,
                "average_strokes": par + average_to_par,
                "sample_size": len(values),
            }
        )
    return results


def score_type_distribution(round_obj: Round) -> Dict[str, Any]:
    """
    Percentage of played holes by score label.

    Anything worse than a triple counts as Bogey+, anything better than
    an eagle as Albatross.
    """
    counts = {name: 0 for name in SCORE_TYPE_ORDER}
    total = 0
    for hole in round_obj.played_holes():
        counts[score_label(hole.score_to_par)] += 1
        total += 1

    row: Dict[str, Any] = {"holes_counted": total}
    for name in SCORE_TYPE_ORDER:
        row[name] = (counts[name] / total * 100.0) if total else 0.0
    return row
