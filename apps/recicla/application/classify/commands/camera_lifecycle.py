"""Camera Lifecycle Manager.

카메라 시작/중지/전환/토치 제어 상태 머신.

States:
    Idle → Starting → Active → Switching → Active
    Active → Stopping → Idle

불변식: 하드웨어 스트림은 동시에 하나만 열려 있습니다.
전환 시 기존 스트림을 완전히 해제한 뒤에 새 스트림을 요청합니다.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from recicla.domain.entities import CameraSession
from recicla.domain.enums import CameraState, FacingMode
from recicla.domain.exceptions import CameraUnavailableError, TorchUnsupportedError

if TYPE_CHECKING:
    from recicla.application.classify.ports import CameraDevicePort, CameraStreamPort

logger = logging.getLogger(__name__)

DEFAULT_FIRST_FRAME_TIMEOUT = 5.0
FIRST_FRAME_POLL_INTERVAL = 0.05


@dataclass(frozen=True)
class TorchToggleResult:
    """토치 토글 결과.

    실패는 예외 대신 error 필드로 보고합니다 (사용자에게 비치명적 알림).
    """

    ok: bool
    torch_on: bool
    error: TorchUnsupportedError | None = None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    @classmethod
    def failure(cls, reason: str, torch_on: bool = False) -> TorchToggleResult:
        return cls(ok=False, torch_on=torch_on, error=TorchUnsupportedError(reason))


class CameraLifecycleManager:
    """카메라 세션의 유일한 소유자."""

    def __init__(
        self,
        device: "CameraDevicePort",
        width: int = 640,
        height: int = 480,
        first_frame_timeout: float = DEFAULT_FIRST_FRAME_TIMEOUT,
    ) -> None:
        self._device = device
        self._width = width
        self._height = height
        self._first_frame_timeout = first_frame_timeout
        self._state = CameraState.IDLE
        self._session: CameraSession | None = None
        self._session_counter = 0
        self._lock = asyncio.Lock()

    @property
    def state(self) -> CameraState:
        return self._state

    @property
    def session(self) -> CameraSession | None:
        """활성 세션. Active 상태가 아니면 None."""
        if self._state is not CameraState.ACTIVE:
            return None
        return self._session

    @property
    def is_active(self) -> bool:
        return self._state is CameraState.ACTIVE

    async def start(self, facing: FacingMode) -> CameraSession:
        """카메라를 시작합니다.

        Raises:
            CameraUnavailableError: 권한 거부, 장치 없음, 첫 프레임 타임아웃
        """
        async with self._lock:
            if self._state is CameraState.ACTIVE and self._session is not None:
                logger.info("Camera already active", extra={"facing": self._session.facing.value})
                return self._session

            self._state = CameraState.STARTING
            try:
                session = await self._acquire(facing)
            except CameraUnavailableError:
                self._state = CameraState.IDLE
                raise

            self._session = session
            self._state = CameraState.ACTIVE
            logger.info(
                "Camera started",
                extra={"facing": facing.value, "session_id": session.session_id},
            )
            return session

    async def stop(self) -> None:
        """스트림을 해제하고 Idle로 돌아갑니다. 이미 Idle이면 아무것도 하지 않습니다."""
        async with self._lock:
            session = self._session
            if session is None:
                self._state = CameraState.IDLE
                return

            self._state = CameraState.STOPPING
            self._session = None
            await self._teardown(session)
            self._state = CameraState.IDLE
            logger.info("Camera stopped", extra={"session_id": session.session_id})

    async def switch_camera(self) -> CameraSession:
        """전면/후면 카메라를 전환합니다.

        기존 스트림을 먼저 해제한 뒤 반대 방향 스트림을 엽니다.
        토치가 켜져 있었다면 새 카메라가 지원할 때만 다시 켭니다.

        Raises:
            CameraUnavailableError: 활성 카메라가 없거나 새 스트림 획득 실패 (Idle로 전이)
        """
        async with self._lock:
            previous = self._session
            if self._state is not CameraState.ACTIVE or previous is None:
                raise CameraUnavailableError("no active camera to switch")

            restore_torch = previous.torch_on
            target = previous.facing.opposite

            self._state = CameraState.SWITCHING
            self._session = None
            await self._teardown(previous)

            try:
                session = await self._acquire(target)
            except CameraUnavailableError:
                self._state = CameraState.IDLE
                logger.warning("Camera switch failed", extra={"target": target.value})
                raise

            self._session = session
            self._state = CameraState.ACTIVE

            if restore_torch and session.supports_torch:
                try:
                    await session.stream.set_torch(True)
                    session.torch_on = True
                except Exception as e:
                    logger.warning("Torch restore failed", extra={"error": str(e)})

            logger.info(
                "Camera switched",
                extra={
                    "from": previous.facing.value,
                    "to": target.value,
                    "torch_on": session.torch_on,
                },
            )
            return session

    async def toggle_flash(self) -> TorchToggleResult:
        """토치를 토글합니다.

        Active 상태의 후면 카메라에서만 유효하며, 그 외에는 하드웨어를
        건드리지 않고 실패 결과를 반환합니다.
        """
        async with self._lock:
            session = self._session
            if self._state is not CameraState.ACTIVE or session is None:
                return TorchToggleResult.failure("Camera is not active")
            if not session.facing.is_back:
                return TorchToggleResult.failure(
                    "Torch is not available on the front camera", torch_on=session.torch_on
                )
            if not session.supports_torch:
                return TorchToggleResult.failure(
                    "This camera does not expose a torch", torch_on=session.torch_on
                )

            target = not session.torch_on
            try:
                await session.stream.set_torch(target)
            except Exception as e:
                logger.warning("Torch toggle failed", extra={"error": str(e)})
                return TorchToggleResult.failure(
                    f"Torch control failed: {e}", torch_on=session.torch_on
                )

            session.torch_on = target
            return TorchToggleResult(ok=True, torch_on=target)

    async def _acquire(self, facing: FacingMode) -> CameraSession:
        try:
            stream = await self._device.open(facing, self._width, self._height)
        except CameraUnavailableError:
            raise
        except Exception as e:
            raise CameraUnavailableError(str(e)) from e

        try:
            await asyncio.wait_for(self._wait_first_frame(stream), self._first_frame_timeout)
        except asyncio.TimeoutError:
            await self._release(stream)
            raise CameraUnavailableError("camera did not deliver a frame") from None
        except Exception as e:
            await self._release(stream)
            raise CameraUnavailableError(str(e)) from e

        self._session_counter += 1
        return CameraSession(facing=facing, stream=stream, session_id=self._session_counter)

    @staticmethod
    async def _wait_first_frame(stream: "CameraStreamPort") -> None:
        while True:
            frame = await stream.read_frame()
            if not frame.is_empty:
                return
            await asyncio.sleep(FIRST_FRAME_POLL_INTERVAL)

    async def _teardown(self, session: CameraSession) -> None:
        """토치를 끄고 모든 트랙을 중지합니다."""
        if session.torch_on:
            try:
                await session.stream.set_torch(False)
            except Exception as e:
                logger.warning("Torch off before teardown failed", extra={"error": str(e)})
            session.torch_on = False
        await self._release(session.stream)

    @staticmethod
    async def _release(stream: "CameraStreamPort") -> None:
        try:
            await stream.stop()
        except Exception as e:
            logger.warning("Camera stream stop failed", extra={"error": str(e)})
