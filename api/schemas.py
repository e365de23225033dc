"""API-specific request and response models.

Every response uses camelCase keys, the same as the saved round blob.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List

from models import HoleRecord, Round, RoundSummary, format_to_par, score_label


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RoundResponse(CamelModel):
    """The whole round as the scorekeeping form consumes it."""
    holes: List[HoleRecord]
    current_hole: int
    current_hole_data: HoleRecord
    completed_holes: List[int]
    score_display: str
    score_label: str

    @classmethod
    def from_round(cls, round_: Round) -> "RoundResponse":
        return cls(
            holes=list(round_.holes),
            current_hole=round_.current_hole,
            current_hole_data=round_.current_hole_data,
            completed_holes=round_.completed_hole_numbers(),
            score_display=format_to_par(round_.current_hole_data.score_to_par),
            score_label=score_label(round_.current_hole_data.score_to_par),
        )


class HoleUpdateRequest(BaseModel):
    field: str
    value: Any = None


class CurrentHoleRequest(BaseModel):
    hole: int


class ResetRequest(BaseModel):
    confirm: bool = False


class ResetResponse(CamelModel):
    reset: bool
    round: RoundResponse


class SummaryStats(RoundSummary):
    """RoundSummary with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SummaryDisplay(CamelModel):
    score_to_par: str
    strokes: str
    fairways: str
    greens: str
    up_and_downs: str
    putts: str


class SummaryResponse(CamelModel):
    """Summary numbers plus the strings the summary screen shows."""
    summary: SummaryStats
    display: SummaryDisplay


class ParScoring(CamelModel):
    par: int
    average_to_par: float
    average_strokes: float
    sample_size: int


class ScoreTypeDistribution(CamelModel):
    holes_counted: int
    percentages: Dict[str, float]


class BreakdownResponse(CamelModel):
    scoring_by_par: List[ParScoring]
    score_type_distribution: ScoreTypeDistribution
