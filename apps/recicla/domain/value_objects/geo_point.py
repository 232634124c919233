"""GeoPoint Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """위경도 좌표 Value Object.

    사용자 위치와 배출 장소 후보 좌표에 모두 사용됩니다.
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not -180 <= self.lng <= 180:
            raise ValueError(f"Invalid longitude: {self.lng}")

    def offset(self, d_lat: float, d_lng: float) -> GeoPoint:
        """좌표를 주어진 만큼 이동한 새 GeoPoint (극/날짜변경선에서 범위 내로 고정)."""
        lat = max(-90.0, min(90.0, self.lat + d_lat))
        lng = max(-180.0, min(180.0, self.lng + d_lng))
        return GeoPoint(lat=lat, lng=lng)

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}
