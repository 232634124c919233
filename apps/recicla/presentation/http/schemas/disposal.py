"""Disposal HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from recicla.application.disposal.dto import DisposalLocationDTO


class CoordinatesSchema(BaseModel):
    lat: float
    lng: float


class PlaceEntry(BaseModel):
    """배출 장소 응답 스키마.

    distance는 표시용 문자열, distanceKm은 원본 거리입니다.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    address: str
    phone: str | None = None
    website: str | None = None
    hours: str | None = None
    distance: str
    distance_km: float = Field(alias="distanceKm")
    coordinates: CoordinatesSchema
    rating: float | None = None
    types: list[str] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, dto: DisposalLocationDTO) -> PlaceEntry:
        return cls(
            id=dto.id,
            name=dto.name,
            address=dto.address,
            phone=dto.phone,
            website=dto.website,
            hours=dto.hours,
            distance=dto.distance_text,
            distance_km=dto.distance_km,
            coordinates=CoordinatesSchema(lat=dto.coordinates.lat, lng=dto.coordinates.lng),
            rating=dto.rating,
            types=list(dto.types),
        )


class DisposalLocationsResponse(BaseModel):
    places: list[PlaceEntry]


class UserLocationResponse(BaseModel):
    lat: float
    lng: float
