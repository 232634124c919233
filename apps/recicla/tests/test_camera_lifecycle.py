"""Camera Lifecycle Manager 단위 테스트."""

from __future__ import annotations

import pytest

from recicla.application.classify import CameraLifecycleManager
from recicla.domain.enums import CameraState, FacingMode
from recicla.domain.exceptions import CameraUnavailableError
from recicla.domain.value_objects import Frame

from fakes import FakeCameraDevice

pytestmark = pytest.mark.asyncio


class TestStart:
    """start 테스트."""

    async def test_start_becomes_active(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        session = await camera.start(FacingMode.ENVIRONMENT)

        assert camera.state is CameraState.ACTIVE
        assert camera.session is session
        assert session.facing is FacingMode.ENVIRONMENT
        assert session.torch_on is False
        assert len(camera_device.open_streams) == 1

    async def test_start_when_active_is_idempotent(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        first = await camera.start(FacingMode.ENVIRONMENT)
        second = await camera.start(FacingMode.ENVIRONMENT)

        assert first is second
        assert len(camera_device.streams) == 1

    async def test_permission_denied_returns_to_idle(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        camera_device.unavailable.add(FacingMode.ENVIRONMENT)

        with pytest.raises(CameraUnavailableError):
            await camera.start(FacingMode.ENVIRONMENT)

        assert camera.state is CameraState.IDLE
        assert camera.session is None

    async def test_unexpected_device_error_is_wrapped(self) -> None:
        class BrokenDevice(FakeCameraDevice):
            async def open(self, facing, width, height):
                raise RuntimeError("driver crashed")

        camera = CameraLifecycleManager(BrokenDevice())
        with pytest.raises(CameraUnavailableError) as exc_info:
            await camera.start(FacingMode.USER)

        assert "driver crashed" in exc_info.value.message
        assert camera.state is CameraState.IDLE

    async def test_no_first_frame_releases_stream(self, camera_device: FakeCameraDevice) -> None:
        camera_device.frames[FacingMode.USER] = [Frame.empty()]
        camera = CameraLifecycleManager(camera_device, first_frame_timeout=0.1)

        with pytest.raises(CameraUnavailableError):
            await camera.start(FacingMode.USER)

        assert camera.state is CameraState.IDLE
        assert camera_device.open_streams == []

    async def test_waits_for_first_non_empty_frame(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        camera_device.frames[FacingMode.USER] = [
            Frame.empty(),
            Frame.empty(),
            Frame(data=b"x", width=4, height=4),
        ]

        await camera.start(FacingMode.USER)

        assert camera.is_active


class TestStop:
    """stop 테스트."""

    async def test_stop_releases_stream(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        await camera.start(FacingMode.ENVIRONMENT)
        await camera.stop()

        assert camera.state is CameraState.IDLE
        assert camera.session is None
        assert camera_device.open_streams == []

    async def test_stop_turns_torch_off_before_release(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        await camera.start(FacingMode.ENVIRONMENT)
        await camera.toggle_flash()
        await camera.stop()

        assert camera_device.events[-2:] == [
            ("torch", "environment", False),
            ("stop", "environment"),
        ]

    async def test_stop_when_idle_is_noop(self, camera: CameraLifecycleManager) -> None:
        await camera.stop()
        assert camera.state is CameraState.IDLE


class TestSwitchCamera:
    """switch_camera 테스트."""

    async def test_switch_releases_old_before_opening_new(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        await camera.start(FacingMode.ENVIRONMENT)
        session = await camera.switch_camera()

        assert session.facing is FacingMode.USER
        assert camera_device.events == [
            ("open", "environment"),
            ("stop", "environment"),
            ("open", "user"),
        ]
        assert len(camera_device.open_streams) == 1

    async def test_switch_with_torch_on_to_front(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        """토치를 끄고 전환하며, 전면 카메라에서는 다시 켜지 않음."""
        await camera.start(FacingMode.ENVIRONMENT)
        await camera.toggle_flash()

        session = await camera.switch_camera()

        assert session.torch_on is False
        assert camera_device.events[1:] == [
            ("torch", "environment", True),
            ("torch", "environment", False),
            ("stop", "environment"),
            ("open", "user"),
        ]
        assert camera_device.streams[-1].torch_calls == []

    async def test_repeated_switch_keeps_single_stream(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        await camera.start(FacingMode.USER)
        for _ in range(4):
            await camera.switch_camera()
            assert len(camera_device.open_streams) == 1

        assert camera.session is not None
        assert camera.session.facing is FacingMode.USER

    async def test_switch_when_idle_raises(self, camera: CameraLifecycleManager) -> None:
        with pytest.raises(CameraUnavailableError):
            await camera.switch_camera()

    async def test_switch_failure_goes_idle(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        await camera.start(FacingMode.ENVIRONMENT)
        camera_device.unavailable.add(FacingMode.USER)

        with pytest.raises(CameraUnavailableError):
            await camera.switch_camera()

        assert camera.state is CameraState.IDLE
        assert camera_device.open_streams == []


class TestToggleFlash:
    """toggle_flash 테스트."""

    async def test_toggle_on_back_camera(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        await camera.start(FacingMode.ENVIRONMENT)

        on = await camera.toggle_flash()
        off = await camera.toggle_flash()

        assert on.ok and on.torch_on is True
        assert off.ok and off.torch_on is False
        assert camera_device.streams[0].torch_calls == [True, False]

    async def test_front_camera_reports_unsupported_without_hardware_call(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        await camera.start(FacingMode.USER)

        result = await camera.toggle_flash()

        assert result.ok is False
        assert result.message
        assert camera_device.streams[0].torch_calls == []

    async def test_not_active_reports_unsupported(self, camera: CameraLifecycleManager) -> None:
        result = await camera.toggle_flash()
        assert result.ok is False
        assert result.torch_on is False

    async def test_stream_without_torch(self) -> None:
        device = FakeCameraDevice(supports_torch=False)
        camera = CameraLifecycleManager(device)
        await camera.start(FacingMode.ENVIRONMENT)

        result = await camera.toggle_flash()

        assert result.ok is False
        assert device.streams[0].torch_calls == []

    async def test_hardware_failure_is_reported(
        self, camera: CameraLifecycleManager, camera_device: FakeCameraDevice
    ) -> None:
        await camera.start(FacingMode.ENVIRONMENT)

        async def failing_set_torch(on: bool) -> None:
            raise OSError("torch busy")

        camera_device.streams[0].set_torch = failing_set_torch

        result = await camera.toggle_flash()

        assert result.ok is False
        assert "torch busy" in result.message
        assert camera.session is not None
        assert camera.session.torch_on is False
