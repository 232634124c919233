"""Recicla Service Configuration.

외부화 원칙:
- Places API Key → SecretStr (로깅 마스킹), 없으면 대체 제공자 체인 사용
- 신뢰도 임계값/기본 라벨 → 배포 모드별로 다르므로 env로 주입
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class Settings(BaseSettings):
    """Recicla 서비스 설정."""

    # === Service Identity ===
    service_name: str = Field("recicla-api", description="Service name")
    service_version: str = Field("1.0.0", description="Service version")
    environment: str = Field("development", description="Environment (development, prod)")
    log_level: str = Field("INFO", description="Root log level")

    # === Places Provider (1차) ===
    google_places_api_key: SecretStr | None = Field(
        None,
        validation_alias=AliasChoices("GOOGLE_PLACES_API_KEY", "RECICLA_GOOGLE_PLACES_API_KEY"),
        description="Google Places API key. 없으면 오픈 데이터 제공자로 대체",
    )
    google_places_base_url: str = "https://maps.googleapis.com/maps/api/place"

    # === Open Data / Geocoding ===
    overpass_url: str = "https://overpass-api.de/api/interpreter"
    nominatim_base_url: str = "https://nominatim.openstreetmap.org"
    nominatim_user_agent: str = Field(
        "ReciclaApp/1.0",
        description="Nominatim은 식별 헤더가 없으면 요청을 거부함",
    )
    ip_geolocation_url: str = "http://ip-api.com/json"
    http_timeout_seconds: float = Field(10.0, gt=0, le=60)

    # === Disposal Resolver Policy ===
    search_radius_m: int = Field(10000, ge=100, le=50000)
    max_results: int = Field(10, ge=1, le=20)
    generic_fallback_distance_km: float = Field(5.0, ge=0)
    default_material: str = "reciclagem"

    # === Classification Policy ===
    confidence_threshold: int = Field(
        50,
        ge=0,
        le=100,
        description="이 값 미만의 신뢰도는 미확인 처리 (배포 모드별 50 또는 70)",
    )
    default_label: str = Field("Defaut", description="미확인 예약 라벨")

    # === Classifier ===
    classifier_endpoint: str | None = Field(
        None,
        description="원격 분류 모델 엔드포인트. 없으면 시뮬레이션 분류기 사용",
    )
    classifier_timeout_seconds: float = Field(5.0, gt=0, le=60)

    # === Camera ===
    camera_front_index: int = Field(0, ge=0)
    camera_back_index: int = Field(1, ge=0)
    frame_width: int = Field(640, ge=1)
    frame_height: int = Field(480, ge=1)
    tick_interval_seconds: float = Field(1 / 30, ge=0)
    first_frame_timeout_seconds: float = Field(5.0, gt=0)

    # === CORS ===
    cors_origins_str: str = Field(DEFAULT_CORS_ORIGINS, description="Allowed CORS origins (콤마 구분)")

    @property
    def cors_origins(self) -> list[str]:
        """CORS origins 파싱."""
        return [o.strip() for o in self.cors_origins_str.split(",") if o.strip()]

    @property
    def places_enabled(self) -> bool:
        return bool(self.google_places_api_key and self.google_places_api_key.get_secret_value())

    # === OpenTelemetry ===
    otel_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://localhost:4318"

    model_config = SettingsConfigDict(
        env_prefix="RECICLA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤을 반환합니다."""
    return Settings()
