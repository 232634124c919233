"""Test fixtures for recicla tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from fakes import SAO_PAULO, FakeCameraDevice, FakeClassifier
from recicla.application.classify import (
    CameraLifecycleManager,
    ClassificationLoop,
    ConfidenceGate,
    RecyclingKnowledgeBase,
)
from recicla.domain.value_objects import GeoPoint


@pytest.fixture
def knowledge_base() -> RecyclingKnowledgeBase:
    return RecyclingKnowledgeBase()


@pytest.fixture
def gate(knowledge_base: RecyclingKnowledgeBase) -> ConfidenceGate:
    return ConfidenceGate(knowledge_base, threshold=50)


@pytest.fixture
def camera_device() -> FakeCameraDevice:
    return FakeCameraDevice()


@pytest.fixture
def camera(camera_device: FakeCameraDevice) -> CameraLifecycleManager:
    return CameraLifecycleManager(camera_device, first_frame_timeout=0.2)


@pytest.fixture
def classifier() -> FakeClassifier:
    return FakeClassifier()


@pytest.fixture
def loop(
    camera: CameraLifecycleManager, classifier: FakeClassifier, gate: ConfidenceGate
) -> ClassificationLoop:
    return ClassificationLoop(camera, classifier, gate, tick_interval=10.0)


@pytest.fixture
def mock_reverse_geocoder() -> AsyncMock:
    """ReverseGeocoderPort mock."""
    geocoder = AsyncMock()
    geocoder.reverse = AsyncMock(return_value=None)
    return geocoder


@pytest.fixture
def user_point() -> GeoPoint:
    return SAO_PAULO
