from .base import BaseGolfModel
from .hole_record import HoleRecord, format_to_par, score_label
from .round import HOLES_PER_ROUND, Round
from .summary import RoundSummary

__all__ = [
    "BaseGolfModel",
    "HoleRecord",
    "Round",
    "RoundSummary",
    "HOLES_PER_ROUND",
    "format_to_par",
    "score_label",
]
