"""Stats API endpoints."""

from fastapi import APIRouter, Depends
from analytics.stats import score_type_distribution, scoring_by_par, summary_display
from storage.round_store import RoundStore
from api.dependencies import get_store
from api.schemas import (
    BreakdownResponse,
    ParScoring,
    ScoreTypeDistribution,
    SummaryDisplay,
    SummaryResponse,
    SummaryStats,
)

router = APIRouter()


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(store: RoundStore = Depends(get_store)):
    summary = store.summary()
    return SummaryResponse(
        summary=SummaryStats(**summary.model_dump()),
        display=SummaryDisplay(**summary_display(summary)),
    )


@router.get("/breakdown", response_model=BreakdownResponse)
async def get_breakdown(store: RoundStore = Depends(get_store)):
    distribution = score_type_distribution(store.round)
    holes_counted = distribution.pop("holes_counted")
    return BreakdownResponse(
        scoring_by_par=[ParScoring(**row) for row in scoring_by_par(store.round)],
        score_type_distribution=ScoreTypeDistribution(
            holes_counted=holes_counted,
            percentages=distribution,
        ),
    )
