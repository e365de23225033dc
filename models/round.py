from pydantic import Field, model_validator
from typing import Any, List, Optional, Tuple

from .base import BaseGolfModel
from .hole_record import HoleRecord

HOLES_PER_ROUND = 18
FIRST_HOLE = 1
LAST_HOLE = HOLES_PER_ROUND


def _empty_holes() -> Tuple[HoleRecord, ...]:
    return tuple(HoleRecord.empty(i) for i in range(FIRST_HOLE, LAST_HOLE + 1))


class Round(BaseGolfModel):
    """An 18-hole round plus the hole the player is currently on."""
    holes: Tuple[HoleRecord, ...] = Field(
        default_factory=_empty_holes,
        min_length=HOLES_PER_ROUND,
        max_length=HOLES_PER_ROUND,
    )
    current_hole: int = Field(FIRST_HOLE, ge=FIRST_HOLE, le=LAST_HOLE, alias="currentHole")

    @model_validator(mode='after')
    def validate_hole_order(self):
        # Index in the sequence is always hole_number - 1
        for index, hole in enumerate(self.holes):
            if hole.hole_number != index + 1:
                raise ValueError(
                    f"Hole at position {index + 1} is numbered {hole.hole_number}"
                )
        return self

    @classmethod
    def new(cls) -> "Round":
        """A fresh round: every hole at defaults, cursor on the first tee."""
        return cls()

    @property
    def current_hole_data(self) -> HoleRecord:
        return self.holes[self.current_hole - 1]

    def get_hole(self, number: int) -> Optional[HoleRecord]:
        """Get a hole by its number (1-18)."""
        if FIRST_HOLE <= number <= LAST_HOLE:
            return self.holes[number - 1]
        return None

    def played_holes(self) -> List[HoleRecord]:
        return [h for h in self.holes if h.is_played]

    def completed_hole_numbers(self) -> List[int]:
        """Hole numbers shown as completed in the hole picker."""
        return [h.hole_number for h in self.holes if h.is_played]

    def with_hole_update(self, hole_number: int, field_name: str, value: Any) -> "Round":
        """Return a new Round with one field on one hole replaced."""
        hole = self.get_hole(hole_number)
        if hole is None:
            raise ValueError(f"Hole number {hole_number} must be {FIRST_HOLE}-{LAST_HOLE}")
        holes = list(self.holes)
        holes[hole_number - 1] = hole.with_field(field_name, value)
        return self.model_copy(update={"holes": tuple(holes)})

    def with_current_hole(self, number: int) -> "Round":
        """Return a new Round with the cursor on `number`."""
        if not FIRST_HOLE <= number <= LAST_HOLE:
            raise ValueError(f"Hole number {number} must be {FIRST_HOLE}-{LAST_HOLE}")
        return self.model_copy(update={"current_hole": number})
