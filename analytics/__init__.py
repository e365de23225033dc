from .stats import (
    score_type_distribution,
    scoring_by_par,
    summarize,
    summary_display,
)

__all__ = [
    "summarize",
    "summary_display",
    "scoring_by_par",
    "score_type_distribution",
]
