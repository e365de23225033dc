from pydantic import BaseModel


class RoundSummary(BaseModel):
    """Aggregate stats over the played holes of a round. Derived, never stored."""
    holes_played: int = 0
    total_strokes: int = 0
    total_par: int = 0
    score_to_par: int = 0

    fairways_hit: int = 0
    fairways_possible: int = 0
    fairway_percentage: int = 0

    greens_hit: int = 0
    greens_possible: int = 0
    gir_percentage: int = 0

    up_and_downs_converted: int = 0
    up_and_down_attempts: int = 0
    up_and_down_percentage: int = 0

    total_putts: int = 0
    putts_per_hole: float = 0
