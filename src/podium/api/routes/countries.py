"""Country endpoints.

GET /api/countries/ids - Country name to id lookup
GET /api/countries/{country_id} - Country detail with medal history
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from podium.aggregation import stats
from podium.api.app import get_dataset
from podium.models.domain import Dataset
from podium.models.types import CountryDetailsResponse, MedalPointResponse

router = APIRouter()


@router.get("/countries/ids", response_model=dict[str, int])
def get_country_ids(dataset: Dataset = Depends(get_dataset)) -> dict[str, int]:
    """Get the id of every country, keyed by name."""
    return stats.ids_by_name(dataset)


@router.get("/countries/{country_id}", response_model=CountryDetailsResponse)
def get_country_details(
    country_id: int,
    dataset: Dataset = Depends(get_dataset),
) -> CountryDetailsResponse:
    """Get detail for one country.

    Args:
        country_id: Positive country id.
        dataset: Current snapshot (injected).

    Returns:
        CountryDetailsResponse with totals and medal history.

    Raises:
        HTTPException: 422 if the id is not positive, 404 if no country
            has that id.
    """
    if country_id <= 0:
        raise HTTPException(
            status_code=422, detail=f"The specified country ID ({country_id}) is not valid."
        )

    details = stats.country_details_by_id(dataset, country_id)

    if details is None:
        raise HTTPException(status_code=404, detail=f"No country was found with the ID {country_id}")

    return CountryDetailsResponse(
        name=details.name,
        participation_count=details.participation_count,
        total_medals=details.total_medals,
        total_athletes=details.total_athletes,
        medal_history=[
            MedalPointResponse(label=point.label, value=point.value)
            for point in details.medal_history
        ],
    )
