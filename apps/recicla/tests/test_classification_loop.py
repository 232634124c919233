"""Classification Loop 단위 테스트."""

from __future__ import annotations

import asyncio

import pytest

from fakes import FakeCameraDevice, FakeClassifier, sample_frame
from recicla.application.classify import (
    CameraLifecycleManager,
    ClassificationLoop,
    ConfidenceGate,
)
from recicla.domain.enums import CameraState, FacingMode
from recicla.domain.exceptions import CameraUnavailableError, ModelNotReadyError
from recicla.domain.value_objects import ClassificationResult, Frame, Prediction

pytestmark = pytest.mark.asyncio


async def _drain(rounds: int = 10) -> None:
    for _ in range(rounds):
        await asyncio.sleep(0)


class BlockingClassifier(FakeClassifier):
    """release 이벤트가 설정될 때까지 predict가 대기하는 분류기."""

    def __init__(self) -> None:
        super().__init__()
        self.entered = asyncio.Event()
        self.release = asyncio.Event()

    async def predict(self, frame: Frame) -> list[Prediction]:
        self.calls += 1
        self.entered.set()
        await self.release.wait()
        return list(self.predictions)


class FlakyClassifier(FakeClassifier):
    """fail이 True이면 예외를 던지는 분류기."""

    def __init__(self) -> None:
        super().__init__()
        self.fail = False

    async def predict(self, frame: Frame) -> list[Prediction]:
        self.calls += 1
        if self.fail:
            raise RuntimeError("inference backend crashed")
        return list(self.predictions)


class TestStart:
    """start 테스트."""

    async def test_model_not_ready_blocks_start(
        self, camera: CameraLifecycleManager, gate: ConfidenceGate
    ) -> None:
        loop = ClassificationLoop(camera, FakeClassifier(ready=False), gate)

        with pytest.raises(ModelNotReadyError):
            await loop.start(FacingMode.ENVIRONMENT)

        assert camera.state is CameraState.IDLE
        assert not loop.is_running

    async def test_start_publishes_first_result(self, loop: ClassificationLoop) -> None:
        published: list[ClassificationResult] = []
        received = asyncio.Event()

        def listener(result: ClassificationResult) -> None:
            published.append(result)
            received.set()

        loop.subscribe(listener)
        await loop.start(FacingMode.ENVIRONMENT)
        await asyncio.wait_for(received.wait(), timeout=1.0)

        assert loop.is_running
        assert published[0].label == "Garrafa pet"
        assert published[0].confidence == 90
        assert loop.latest_result == published[0]

        await loop.stop()

    async def test_start_same_facing_while_running_returns_session(
        self, loop: ClassificationLoop, camera_device: FakeCameraDevice
    ) -> None:
        first = await loop.start(FacingMode.ENVIRONMENT)
        second = await loop.start(FacingMode.ENVIRONMENT)

        assert first is second
        assert len(camera_device.streams) == 1
        await loop.stop()

    async def test_start_other_facing_while_running_switches(
        self, loop: ClassificationLoop, camera_device: FakeCameraDevice
    ) -> None:
        await loop.start(FacingMode.ENVIRONMENT)
        session = await loop.start(FacingMode.USER)

        assert session.facing is FacingMode.USER
        assert len(camera_device.open_streams) == 1
        await loop.stop()


class TestTick:
    """tick 테스트."""

    async def test_tick_without_session_does_nothing(
        self, loop: ClassificationLoop, classifier: FakeClassifier
    ) -> None:
        assert await loop.tick(0) is None
        assert classifier.calls == 0

    async def test_tick_skips_empty_frame(
        self,
        camera: CameraLifecycleManager,
        classifier: FakeClassifier,
        loop: ClassificationLoop,
        camera_device: FakeCameraDevice,
    ) -> None:
        await camera.start(FacingMode.ENVIRONMENT)
        camera_device.streams[0].frames = [Frame.empty()]

        assert await loop.tick(0) is None
        assert classifier.calls == 0

    async def test_tick_publishes_and_counts(
        self, camera: CameraLifecycleManager, loop: ClassificationLoop
    ) -> None:
        session = await camera.start(FacingMode.ENVIRONMENT)

        result = await loop.tick(0)

        assert result is not None
        assert result.label == "Garrafa pet"
        assert session.published_results == 1

    async def test_low_confidence_tick_publishes_unidentified(
        self, camera: CameraLifecycleManager, gate: ConfidenceGate
    ) -> None:
        classifier = FakeClassifier([Prediction("Papelão", 0.3), Prediction("Esponja", 0.2)])
        loop = ClassificationLoop(camera, classifier, gate)
        await camera.start(FacingMode.ENVIRONMENT)

        result = await loop.tick(0)

        assert result is not None
        assert result.label == "Defaut"
        assert result.is_unidentified

    async def test_classifier_error_keeps_last_result(
        self, camera: CameraLifecycleManager, gate: ConfidenceGate
    ) -> None:
        classifier = FlakyClassifier()
        loop = ClassificationLoop(camera, classifier, gate)
        await camera.start(FacingMode.ENVIRONMENT)
        previous = await loop.tick(0)

        classifier.fail = True
        assert await loop.tick(0) is None
        assert loop.latest_result is previous
        assert classifier.calls == 2

    async def test_listener_error_does_not_stop_publish(
        self, camera: CameraLifecycleManager, loop: ClassificationLoop
    ) -> None:
        received: list[ClassificationResult] = []

        def broken(result: ClassificationResult) -> None:
            raise ValueError("listener bug")

        loop.subscribe(broken)
        loop.subscribe(received.append)
        await camera.start(FacingMode.ENVIRONMENT)

        await loop.tick(0)

        assert len(received) == 1

    async def test_unsubscribe(
        self, camera: CameraLifecycleManager, loop: ClassificationLoop
    ) -> None:
        received: list[ClassificationResult] = []
        unsubscribe = loop.subscribe(received.append)
        unsubscribe()
        await camera.start(FacingMode.ENVIRONMENT)

        await loop.tick(0)

        assert received == []


class TestStop:
    """stop 테스트."""

    async def test_stop_cancels_pending_tick(
        self, loop: ClassificationLoop, classifier: FakeClassifier
    ) -> None:
        received = asyncio.Event()
        published: list[ClassificationResult] = []

        def listener(result: ClassificationResult) -> None:
            published.append(result)
            received.set()

        loop.subscribe(listener)
        await loop.start(FacingMode.ENVIRONMENT)
        await asyncio.wait_for(received.wait(), timeout=1.0)

        await loop.stop()
        await _drain()

        assert len(published) == 1
        assert classifier.calls == 1
        assert loop.latest_result is None
        assert not loop.is_running
        assert loop.camera.state is CameraState.IDLE

    async def test_in_flight_result_discarded_after_stop(
        self, camera: CameraLifecycleManager, gate: ConfidenceGate
    ) -> None:
        classifier = BlockingClassifier()
        loop = ClassificationLoop(camera, classifier, gate, tick_interval=10.0)
        published: list[ClassificationResult] = []
        loop.subscribe(published.append)

        await loop.start(FacingMode.ENVIRONMENT)
        await asyncio.wait_for(classifier.entered.wait(), timeout=1.0)

        await loop.stop()
        classifier.release.set()
        await _drain()

        assert published == []
        assert loop.latest_result is None
        assert camera.state is CameraState.IDLE

    async def test_stop_when_idle(self, loop: ClassificationLoop) -> None:
        await loop.stop()
        assert loop.latest_result is None

    async def test_stop_during_first_frame_wait_aborts_start(
        self,
        loop: ClassificationLoop,
        camera_device: FakeCameraDevice,
        classifier: FakeClassifier,
    ) -> None:
        camera_device.frames[FacingMode.ENVIRONMENT] = [
            Frame.empty(),
            Frame.empty(),
            sample_frame(),
        ]
        start_task = asyncio.create_task(loop.start(FacingMode.ENVIRONMENT))
        await asyncio.sleep(0.01)

        await loop.stop()
        with pytest.raises(CameraUnavailableError):
            await start_task
        await _drain()

        assert not loop.is_running
        assert loop.camera.state is CameraState.IDLE
        assert camera_device.open_streams == []
        assert classifier.calls == 0

    async def test_loop_exits_when_camera_released_directly(
        self, camera: CameraLifecycleManager, classifier: FakeClassifier, gate: ConfidenceGate
    ) -> None:
        loop = ClassificationLoop(camera, classifier, gate, tick_interval=0.01)
        await loop.start(FacingMode.ENVIRONMENT)

        await camera.stop()
        for _ in range(100):
            if not loop.is_running:
                break
            await asyncio.sleep(0.01)

        assert not loop.is_running

    async def test_restart_after_stop(self, loop: ClassificationLoop) -> None:
        await loop.start(FacingMode.ENVIRONMENT)
        await loop.stop()
        session = await loop.start(FacingMode.USER)

        assert session.facing is FacingMode.USER
        assert loop.is_running
        await loop.stop()


class TestSwitchAndFlash:
    """switch_camera / toggle_flash 위임 테스트."""

    async def test_switch_failure_stops_loop(
        self, loop: ClassificationLoop, camera_device: FakeCameraDevice
    ) -> None:
        await loop.start(FacingMode.ENVIRONMENT)
        camera_device.unavailable.add(FacingMode.USER)

        with pytest.raises(CameraUnavailableError):
            await loop.switch_camera()

        assert not loop.is_running
        assert loop.camera.state is CameraState.IDLE
        assert camera_device.open_streams == []

    async def test_toggle_flash_front_camera(self, loop: ClassificationLoop) -> None:
        await loop.start(FacingMode.USER)

        result = await loop.toggle_flash()

        assert result.ok is False
        await loop.stop()
