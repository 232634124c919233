"""Dependency Injection for FastAPI.

HTTP 클라이언트/분류기/카메라 루프는 프로세스 단위 싱글톤입니다.
종료 시 close_clients()로 정리합니다.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from recicla.application.classify import (
    AnalyzeImageCommand,
    CameraLifecycleManager,
    ClassificationLoop,
    ConfidenceGate,
    RecyclingKnowledgeBase,
)
from recicla.application.classify.ports import ClassifierPort
from recicla.application.disposal import (
    FindDisposalLocationsQuery,
    GenericSuggestionStrategy,
    LocateUserQuery,
    OpenDataStrategy,
    PlacesSearchStrategy,
)
from recicla.application.disposal.ports import ReverseGeocoderPort
from recicla.application.disposal.strategies import DisposalStrategy
from recicla.domain.constants import LEGACY_DETECTOR_GUIDANCE
from recicla.infrastructure.camera import OpenCVCameraDevice, OpenCVFrameDecoder
from recicla.infrastructure.integrations.classifier import HttpClassifier, SimulatedClassifier
from recicla.infrastructure.integrations.google_places import GooglePlacesHttpClient
from recicla.infrastructure.integrations.ip_geolocation import IpApiGeolocator
from recicla.infrastructure.integrations.nominatim import NominatimHttpClient
from recicla.infrastructure.integrations.overpass import OverpassHttpClient
from recicla.setup.config import get_settings

logger = logging.getLogger(__name__)

_places_client: GooglePlacesHttpClient | None = None
_overpass_client: OverpassHttpClient | None = None
_nominatim_client: NominatimHttpClient | None = None
_geolocator: IpApiGeolocator | None = None
_classifier: ClassifierPort | None = None
_classification_loop: ClassificationLoop | None = None


# ─────────────────────────────────────────────────────────────────────────────
# Infrastructure Dependencies
# ─────────────────────────────────────────────────────────────────────────────


def get_places_client() -> GooglePlacesHttpClient | None:
    """Google Places Client 싱글톤을 반환합니다. API 키가 없으면 None."""
    global _places_client  # noqa: PLW0603
    if _places_client is None:
        settings = get_settings()
        if settings.places_enabled:
            _places_client = GooglePlacesHttpClient(
                api_key=settings.google_places_api_key.get_secret_value(),
                base_url=settings.google_places_base_url,
                timeout=settings.http_timeout_seconds,
            )
            logger.info("Google Places HTTP client created")
        else:
            logger.warning("GOOGLE_PLACES_API_KEY not set, places search disabled")
    return _places_client


def get_overpass_client() -> OverpassHttpClient:
    global _overpass_client  # noqa: PLW0603
    if _overpass_client is None:
        settings = get_settings()
        _overpass_client = OverpassHttpClient(
            url=settings.overpass_url,
            timeout=settings.http_timeout_seconds,
        )
    return _overpass_client


def get_reverse_geocoder() -> ReverseGeocoderPort:
    global _nominatim_client  # noqa: PLW0603
    if _nominatim_client is None:
        settings = get_settings()
        _nominatim_client = NominatimHttpClient(
            base_url=settings.nominatim_base_url,
            user_agent=settings.nominatim_user_agent,
            timeout=settings.http_timeout_seconds,
        )
    return _nominatim_client


def get_geolocator() -> IpApiGeolocator:
    global _geolocator  # noqa: PLW0603
    if _geolocator is None:
        _geolocator = IpApiGeolocator(url=get_settings().ip_geolocation_url)
    return _geolocator


def get_classifier() -> ClassifierPort:
    """분류기 싱글톤. 엔드포인트가 없으면 시뮬레이션 분류기."""
    global _classifier  # noqa: PLW0603
    if _classifier is None:
        settings = get_settings()
        if settings.classifier_endpoint:
            _classifier = HttpClassifier(
                endpoint=settings.classifier_endpoint,
                timeout=settings.classifier_timeout_seconds,
            )
            logger.info(
                "Remote classifier configured",
                extra={"endpoint": settings.classifier_endpoint},
            )
        else:
            _classifier = SimulatedClassifier(labels=list(LEGACY_DETECTOR_GUIDANCE))
            logger.warning("RECICLA_CLASSIFIER_ENDPOINT not set, using simulated classifier")
    return _classifier


@lru_cache
def get_frame_decoder() -> OpenCVFrameDecoder:
    return OpenCVFrameDecoder()


# ─────────────────────────────────────────────────────────────────────────────
# Domain Services
# ─────────────────────────────────────────────────────────────────────────────


@lru_cache
def get_knowledge_base() -> RecyclingKnowledgeBase:
    return RecyclingKnowledgeBase(default_label=get_settings().default_label)


@lru_cache
def get_confidence_gate() -> ConfidenceGate:
    return ConfidenceGate(get_knowledge_base(), threshold=get_settings().confidence_threshold)


def get_classification_loop() -> ClassificationLoop:
    """카메라 + 분류 루프 싱글톤."""
    global _classification_loop  # noqa: PLW0603
    if _classification_loop is None:
        settings = get_settings()
        camera = CameraLifecycleManager(
            OpenCVCameraDevice(
                front_index=settings.camera_front_index,
                back_index=settings.camera_back_index,
            ),
            width=settings.frame_width,
            height=settings.frame_height,
            first_frame_timeout=settings.first_frame_timeout_seconds,
        )
        _classification_loop = ClassificationLoop(
            camera,
            get_classifier(),
            get_confidence_gate(),
            tick_interval=settings.tick_interval_seconds,
        )
    return _classification_loop


# ─────────────────────────────────────────────────────────────────────────────
# Application Dependencies (Commands / Queries)
# ─────────────────────────────────────────────────────────────────────────────


def build_disposal_strategies() -> list[DisposalStrategy]:
    """우선순위 순서의 제공자 전략 목록. Places 키가 없으면 1차 전략을 생략합니다."""
    settings = get_settings()
    geocoder = get_reverse_geocoder()
    strategies: list[DisposalStrategy] = []

    places = get_places_client()
    if places is not None:
        strategies.append(
            PlacesSearchStrategy(
                places,
                radius_m=settings.search_radius_m,
                max_results=settings.max_results,
            )
        )
    strategies.append(
        OpenDataStrategy(
            get_overpass_client(),
            geocoder,
            radius_m=settings.search_radius_m,
            max_results=settings.max_results,
        )
    )
    strategies.append(
        GenericSuggestionStrategy(
            geocoder, nominal_distance_km=settings.generic_fallback_distance_km
        )
    )
    return strategies


def get_find_disposal_locations_query() -> FindDisposalLocationsQuery:
    """FindDisposalLocationsQuery를 주입합니다."""
    return FindDisposalLocationsQuery(
        build_disposal_strategies(),
        default_material=get_settings().default_material,
    )


def get_locate_user_query() -> LocateUserQuery:
    return LocateUserQuery(get_geolocator())


def get_analyze_image_command() -> AnalyzeImageCommand:
    """AnalyzeImageCommand를 주입합니다."""
    return AnalyzeImageCommand(
        classifier=get_classifier(),
        decoder=get_frame_decoder(),
        gate=get_confidence_gate(),
        knowledge_base=get_knowledge_base(),
    )


FindDisposalLocationsQueryDep = Annotated[
    FindDisposalLocationsQuery, Depends(get_find_disposal_locations_query)
]
LocateUserQueryDep = Annotated[LocateUserQuery, Depends(get_locate_user_query)]
AnalyzeImageCommandDep = Annotated[AnalyzeImageCommand, Depends(get_analyze_image_command)]
ClassificationLoopDep = Annotated[ClassificationLoop, Depends(get_classification_loop)]
ClassifierDep = Annotated[ClassifierPort, Depends(get_classifier)]


# ─────────────────────────────────────────────────────────────────────────────
# Shutdown
# ─────────────────────────────────────────────────────────────────────────────


async def close_clients() -> None:
    """카메라 루프를 멈추고 모든 HTTP 클라이언트를 닫습니다."""
    global _places_client, _overpass_client, _nominatim_client, _geolocator  # noqa: PLW0603
    global _classifier, _classification_loop  # noqa: PLW0603

    if _classification_loop is not None:
        await _classification_loop.stop()
        _classification_loop = None

    for client in (_places_client, _overpass_client, _nominatim_client, _geolocator, _classifier):
        if client is None:
            continue
        try:
            await client.close()
        except Exception as e:
            logger.warning(
                "Client close failed",
                extra={"client": type(client).__name__, "error": str(e)},
            )

    _places_client = None
    _overpass_client = None
    _nominatim_client = None
    _geolocator = None
    _classifier = None
