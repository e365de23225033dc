from pydantic import AliasChoices, Field, field_validator
from typing import Any, Dict, Optional

from .base import BaseGolfModel

PUTTS_MIN = 0
PUTTS_MAX = 10

# Every name a caller may use for an updatable field -> attribute name.
UPDATABLE_FIELDS: Dict[str, str] = {
    "par": "par",
    "score_to_par": "score_to_par",
    "scoreToPar": "score_to_par",
    "fairway_hit": "fairway_hit",
    "fairwayHit": "fairway_hit",
    "green_in_regulation": "green_in_regulation",
    "greenInRegulation": "green_in_regulation",
    "up_and_down": "up_and_down",
    "upAndDown": "up_and_down",
    "putts": "putts",
}


def score_label(to_par: int) -> str:
    """Name for a score relative to par (Birdie, Bogey, etc.)."""
    score_names = {
        -2: "Eagle",
        -1: "Birdie",
        0: "Par",
        1: "Bogey",
        2: "Double",
        3: "Triple",
    }
    if to_par <= -3:
        return "Albatross"
    if to_par >= 4:
        return "Bogey+"
    return score_names[to_par]


def format_to_par(to_par: int) -> str:
    """Display a to-par value: E for even, +n over, -n under."""
    if to_par == 0:
        return "E"
    if to_par > 0:
        return f"+{to_par}"
    return str(to_par)


class HoleRecord(BaseGolfModel):
    """One hole of a round as recorded by the player."""

    hole_number: int = Field(
        ...,
        ge=1,
        le=18,
        validation_alias=AliasChoices("hole", "holeNumber", "hole_number"),
        serialization_alias="hole",
    )
    par: int = Field(4, ge=3, le=5)
    score_to_par: int = Field(0, alias="scoreToPar")
    fairway_hit: Optional[bool] = Field(None, alias="fairwayHit")  # None on par 3s
    green_in_regulation: Optional[bool] = Field(None, alias="greenInRegulation")  # None = unplayed
    up_and_down: Optional[bool] = Field(None, alias="upAndDown")  # None when GIR hit
    putts: int = 2

    @field_validator("putts")
    @classmethod
    def clamp_putts(cls, v):
        return max(PUTTS_MIN, min(PUTTS_MAX, v))

    @classmethod
    def empty(cls, hole_number: int) -> "HoleRecord":
        return cls(hole_number=hole_number)

    @property
    def is_played(self) -> bool:
        """A hole counts as played once GIR has been recorded either way."""
        return self.green_in_regulation is not None

    @property
    def strokes(self) -> int:
        return self.par + self.score_to_par

    def get_score_type(self) -> str:
        return score_label(self.score_to_par)

    def with_field(self, field_name: str, value: Any) -> "HoleRecord":
        """
        Return a copy of this hole with one field replaced.

        Par 3 clears fairway_hit and a GIR hit clears up_and_down, only at
        the moment that field is written. Raises ValueError (including
        pydantic's ValidationError) for unknown fields or invalid values.
        """
        attr = UPDATABLE_FIELDS.get(field_name)
        if attr is None:
            raise ValueError(f"Field '{field_name}' cannot be updated")

        updated = HoleRecord.model_validate({**self.model_dump(), attr: value})
        if attr == "par" and updated.par == 3:
            updated = updated.model_copy(update={"fairway_hit": None})
        if attr == "green_in_regulation" and updated.green_in_regulation is True:
            updated = updated.model_copy(update={"up_and_down": None})
        return updated
