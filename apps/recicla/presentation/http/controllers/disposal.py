"""Disposal Controller.

- GET /api/disposal-locations: 주변 배출 장소 (대체 제공자 체인)
- GET /api/v1/location: 클라이언트 IP 기반 대략적 위치
"""

from __future__ import annotations

from fastapi import APIRouter, Query, Request

from recicla.presentation.http.schemas import (
    DisposalLocationsResponse,
    PlaceEntry,
    UserLocationResponse,
)
from recicla.setup.dependencies import FindDisposalLocationsQueryDep, LocateUserQueryDep

router = APIRouter(tags=["disposal"])
location_router = APIRouter(tags=["location"])


@router.get(
    "/disposal-locations",
    response_model=DisposalLocationsResponse,
    summary="Find nearby disposal locations",
)
async def disposal_locations(
    query: FindDisposalLocationsQueryDep,
    lat: float | None = Query(None, ge=-90, le=90),
    lng: float | None = Query(None, ge=-180, le=180),
    material: str | None = Query(None, max_length=100, description="재질 (기본: reciclagem)"),
) -> DisposalLocationsResponse:
    """주변 배출 장소를 거리순으로 반환합니다. 제공자 실패는 응답에 드러나지 않습니다."""
    locations = await query.execute(lat=lat, lng=lng, material=material)
    return DisposalLocationsResponse(places=[PlaceEntry.from_dto(loc) for loc in locations])


@location_router.get(
    "/location",
    response_model=UserLocationResponse,
    summary="Approximate user location",
)
async def user_location(request: Request, query: LocateUserQueryDep) -> UserLocationResponse:
    """클라이언트 IP로 사용자 위치를 추정합니다."""
    point = await query.execute(_client_ip(request))
    return UserLocationResponse(lat=point.lat, lng=point.lng)


def _client_ip(request: Request) -> str | None:
    """X-Forwarded-For 첫 항목, 없으면 소켓 주소."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return request.client.host if request.client else None
