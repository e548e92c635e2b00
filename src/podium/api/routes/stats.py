"""Dataset-wide statistics endpoints.

GET /api/stats - Edition and country counts
GET /api/medals - Total medals per country
POST /api/dataset/reload - Replace the snapshot from its source
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from podium.aggregation import stats
from podium.api.app import get_dataset, get_source
from podium.models.domain import Dataset
from podium.models.types import GlobalStatsResponse, MedalsByCountryResponse
from podium.source.loader import DatasetLoadError, DatasetSource

router = APIRouter()


def _global_stats_response(dataset: Dataset) -> GlobalStatsResponse:
    result = stats.global_stats(dataset)
    return GlobalStatsResponse(
        total_games=result.total_games,
        total_countries=result.total_countries,
    )


@router.get("/stats", response_model=GlobalStatsResponse)
def get_global_stats(dataset: Dataset = Depends(get_dataset)) -> GlobalStatsResponse:
    """Get the number of distinct editions and of countries."""
    return _global_stats_response(dataset)


@router.get("/medals", response_model=MedalsByCountryResponse)
def get_medals_by_country(dataset: Dataset = Depends(get_dataset)) -> MedalsByCountryResponse:
    """Get total medals per country.

    Returns:
        Index-aligned country names and medal totals, in dataset order.
    """
    result = stats.medals_by_country(dataset)
    return MedalsByCountryResponse(
        country_names=result.names,
        country_total_medals=result.totals,
    )


@router.post("/dataset/reload", response_model=GlobalStatsResponse)
def reload_dataset(source: DatasetSource = Depends(get_source)) -> GlobalStatsResponse:
    """Reload the snapshot from its source.

    Raises:
        HTTPException: 503 if the new snapshot cannot be loaded. The
            previous snapshot stays in service.
    """
    try:
        dataset = source.reload()
    except DatasetLoadError as e:
        raise HTTPException(status_code=503, detail=f"Dataset unavailable: {e}") from e

    return _global_stats_response(dataset)
