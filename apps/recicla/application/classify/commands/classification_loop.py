"""Classification Loop.

카메라 프레임을 연속으로 분류해 ClassificationResult를 발행하는 루프.

Tick:
    1. 활성 세션에서 현재 프레임 가져오기 (크기 0이면 건너뜀)
    2. 분류기 호출 (루프의 유일한 대기 지점)
    3. 신뢰도 게이트 → 지식 베이스 조회
    4. 결과 발행 후 다음 틱 예약

이전 틱의 분류기 호출이 끝난 뒤에만 다음 틱이 예약되므로 발행이 섞이지 않습니다.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Callable

from recicla.domain.enums import CameraState, FacingMode
from recicla.domain.exceptions import CameraUnavailableError, ModelNotReadyError

if TYPE_CHECKING:
    from recicla.application.classify.commands.camera_lifecycle import (
        CameraLifecycleManager,
        TorchToggleResult,
    )
    from recicla.application.classify.ports import ClassifierPort
    from recicla.application.classify.services import ConfidenceGate
    from recicla.domain.entities import CameraSession
    from recicla.domain.value_objects import ClassificationResult

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 1 / 30

ResultListener = Callable[["ClassificationResult"], None]


class ClassificationLoop:
    """실시간 분류 루프.

    Camera Lifecycle Manager를 내장하며, 세션은 매니저를 통해서만 접근합니다.
    """

    def __init__(
        self,
        camera: "CameraLifecycleManager",
        classifier: "ClassifierPort",
        gate: "ConfidenceGate",
        tick_interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        self._camera = camera
        self._classifier = classifier
        self._gate = gate
        self._tick_interval = tick_interval
        self._task: asyncio.Task[None] | None = None
        # start/stop마다 증가. 이전 세대의 틱 결과는 발행하지 않음
        self._generation = 0
        self._classifying_generation: int | None = None
        self._latest: ClassificationResult | None = None
        self._listeners: list[ResultListener] = []

    @property
    def camera(self) -> "CameraLifecycleManager":
        return self._camera

    @property
    def latest_result(self) -> "ClassificationResult | None":
        return self._latest

    @property
    def is_model_ready(self) -> bool:
        return self._classifier.is_ready

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def subscribe(self, listener: ResultListener) -> Callable[[], None]:
        """결과 리스너를 등록하고 해제 함수를 반환합니다."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def start(self, facing: FacingMode) -> "CameraSession":
        """카메라를 열고 틱 루프를 시작합니다.

        Raises:
            ModelNotReadyError: 분류 모델 미로드
            CameraUnavailableError: 카메라 획득 실패, 또는 첫 프레임 대기 중 stop() 호출
        """
        if not self._classifier.is_ready:
            raise ModelNotReadyError()

        current = self._camera.session
        if self.is_running and current is not None:
            if current.facing is facing:
                return current
            return await self.switch_camera()

        generation = self._generation
        session = await self._camera.start(facing)
        if generation != self._generation:
            # 첫 프레임 대기 중 stop()이 호출됨
            await self._camera.stop()
            raise CameraUnavailableError("camera start was interrupted by stop")

        self._generation += 1
        self._task = asyncio.create_task(
            self._run(self._generation), name=f"classification-loop-{self._generation}"
        )
        logger.info("Classification loop started", extra={"generation": self._generation})
        return session

    async def stop(self) -> None:
        """예약된 틱을 취소하고 세션을 해제한 뒤 마지막 결과를 지웁니다.

        분류기 호출 중이던 틱은 끝까지 실행되지만 그 결과는 버려집니다.
        """
        stopped_generation = self._generation
        self._generation += 1
        task, self._task = self._task, None

        if task is not None and not task.done():
            if self._classifying_generation == stopped_generation:
                logger.debug("Stopping during classifier call, result will be discarded")
            else:
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task

        await self._camera.stop()
        self._latest = None
        logger.info("Classification loop stopped")

    async def switch_camera(self) -> "CameraSession":
        """카메라 방향을 전환합니다. 실패하면 루프도 중지합니다."""
        try:
            return await self._camera.switch_camera()
        except CameraUnavailableError:
            await self.stop()
            raise

    async def toggle_flash(self) -> "TorchToggleResult":
        return await self._camera.toggle_flash()

    async def _run(self, generation: int) -> None:
        while generation == self._generation:
            if self._camera.state is CameraState.IDLE:
                logger.info("Camera released, classification loop exiting")
                break
            await self.tick(generation)
            if generation != self._generation:
                break
            await asyncio.sleep(self._tick_interval)

    async def tick(self, generation: int) -> "ClassificationResult | None":
        """틱 한 번을 실행하고 발행한 결과를 반환합니다 (발행하지 않았으면 None)."""
        session = self._camera.session
        if session is None:
            return None

        try:
            frame = await session.stream.read_frame()
        except Exception as e:
            logger.warning("Frame read failed", extra={"error": str(e)})
            return None
        if frame.is_empty:
            return None

        self._classifying_generation = generation
        try:
            predictions = await self._classifier.predict(frame)
        except Exception:
            logger.error("Classifier invocation failed", exc_info=True)
            return None
        finally:
            if self._classifying_generation == generation:
                self._classifying_generation = None

        if generation != self._generation:
            logger.debug("Discarding prediction from stopped session")
            return None

        result = self._gate.evaluate(predictions)
        if result is None:
            logger.warning("Classifier returned no predictions")
            return None

        session.published_results += 1
        self._publish(result)
        return result

    def _publish(self, result: "ClassificationResult") -> None:
        self._latest = result
        for listener in list(self._listeners):
            try:
                listener(result)
            except Exception:
                logger.exception("Result listener failed")
