"""API routes for the trip planner.

GET /api/v1/attractions generates attractions for one or more cities with
the local heuristic generator (keyword rules + OSM geocoding).
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from tripplanner.models import AppError, Attraction, ErrorCode
from tripplanner.services import ServiceContainer

logger = logging.getLogger(__name__)

router = APIRouter()


def get_services(request: Request) -> ServiceContainer:
    """Service container created by the application lifespan."""
    return request.app.state.services


def _bad_request(message: str, user_message: str) -> HTTPException:
    error = AppError(code=ErrorCode.INVALID_INPUT, message=message, user_message=user_message)
    return HTTPException(status_code=400, detail=error.model_dump(mode="json"))


def parse_cities(cities: Optional[str]) -> list[str]:
    """Split the comma-separated ``cities`` parameter.

    Blanks are dropped and repeats (compared case-insensitively) keep their
    first spelling, so "Paris,paris" is generated once.
    """
    if not cities:
        return []
    seen: set[str] = set()
    result: list[str] = []
    for city in cities.split(","):
        city = city.strip()
        if city and city.lower() not in seen:
            seen.add(city.lower())
            result.append(city)
    return result


@router.get("/v1/attractions", response_model=list[Attraction])
async def list_attractions(
    start_date: Optional[str] = Query(None, description="Trip start date (not used for ranking)"),
    end_date: Optional[str] = Query(None, description="Trip end date (not used for ranking)"),
    criteria: Optional[str] = Query(None, description="Free-text interests, e.g. 'cultural'"),
    cities: Optional[str] = Query(None, description="Comma-separated city names"),
    provider: Optional[str] = Query(None, description="Geocoding provider: nominatim or photon"),
    use_ai: bool = Query(False, description="Accepted for client compatibility"),
    services: ServiceContainer = Depends(get_services),
) -> list[Attraction]:
    """Generate attractions for each requested city.

    Cities are processed in the order given and their lists concatenated.
    A city with no resolvable attractions contributes nothing; an empty
    response is a valid answer.
    """
    city_names = parse_cities(cities)
    if not city_names:
        raise _bad_request(
            "Query parameter 'cities' is required",
            "Please enter at least one city.",
        )

    try:
        generator = services.generator(provider)
    except ValueError as e:
        raise _bad_request(str(e), "Unsupported map provider.") from e

    logger.info(f"[API] Attractions for {city_names} (provider={provider}, use_ai={use_ai})")
    attractions: list[Attraction] = []
    for city in city_names:
        attractions.extend(
            await generator.generate(
                city,
                start_date=start_date,
                end_date=end_date,
                criteria=criteria,
            )
        )
    return attractions
