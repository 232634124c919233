"""거리 계산/표시 도메인 서비스."""

from __future__ import annotations

import math

from recicla.domain.value_objects import GeoPoint

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """두 좌표 간 대원 거리를 km로 계산 (Haversine)."""
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    d_phi = math.radians(b.lat - a.lat)
    d_lambda = math.radians(b.lng - a.lng)
    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def format_distance(distance_km: float) -> str:
    """표시용 거리 문자열.

    1km 미만은 미터 정수("450m"), 이상은 소수 첫째 자리 km("12.3 km").
    """
    if distance_km < 1:
        return f"{math.floor(distance_km * 1000 + 0.5)}m"
    return f"{distance_km:.1f} km"
