"""테스트용 포트 구현 (카메라/분류기)."""

from __future__ import annotations

from recicla.application.classify.ports import (
    CameraDevicePort,
    CameraStreamPort,
    ClassifierPort,
)
from recicla.domain.enums import FacingMode
from recicla.domain.exceptions import CameraUnavailableError
from recicla.domain.value_objects import Frame, GeoPoint, Prediction

SAO_PAULO = GeoPoint(lat=-23.5505, lng=-46.6333)


def sample_frame() -> Frame:
    return Frame(data=b"\x00" * 12, width=2, height=2)


class FakeStream(CameraStreamPort):
    """하드웨어 없이 동작하는 스트림. 호출 순서를 events에 기록합니다."""

    def __init__(
        self,
        name: str,
        events: list[tuple],
        frames: list[Frame] | None = None,
        supports_torch: bool = True,
    ) -> None:
        self.name = name
        self.events = events
        self.frames = list(frames) if frames is not None else [sample_frame()]
        self._supports_torch = supports_torch
        self.torch_calls: list[bool] = []
        self.stopped = False

    @property
    def supports_torch(self) -> bool:
        return self._supports_torch

    async def read_frame(self) -> Frame:
        if len(self.frames) > 1:
            return self.frames.pop(0)
        return self.frames[0] if self.frames else Frame.empty()

    async def set_torch(self, on: bool) -> None:
        self.torch_calls.append(on)
        self.events.append(("torch", self.name, on))

    async def stop(self) -> None:
        self.stopped = True
        self.events.append(("stop", self.name))


class FakeCameraDevice(CameraDevicePort):
    """facing별 실패/빈 프레임을 설정할 수 있는 카메라 장치."""

    def __init__(self, supports_torch: bool = True) -> None:
        self.events: list[tuple] = []
        self.streams: list[FakeStream] = []
        self.unavailable: set[FacingMode] = set()
        self.frames: dict[FacingMode, list[Frame]] = {}
        self.supports_torch = supports_torch

    @property
    def open_streams(self) -> list[FakeStream]:
        return [s for s in self.streams if not s.stopped]

    async def open(self, facing: FacingMode, width: int, height: int) -> CameraStreamPort:
        if facing in self.unavailable:
            raise CameraUnavailableError("permission denied")
        self.events.append(("open", facing.value))
        stream = FakeStream(
            facing.value,
            self.events,
            frames=self.frames.get(facing),
            supports_torch=self.supports_torch,
        )
        self.streams.append(stream)
        return stream


class FakeClassifier(ClassifierPort):
    """고정 예측을 반환하는 분류기."""

    def __init__(self, predictions: list[Prediction] | None = None, ready: bool = True) -> None:
        self.predictions = predictions or [Prediction("Garrafa pet", 0.9)]
        self._ready = ready
        self.calls = 0

    @property
    def is_ready(self) -> bool:
        return self._ready

    async def load(self) -> None:
        self._ready = True

    async def predict(self, frame: Frame) -> list[Prediction]:
        self.calls += 1
        return list(self.predictions)

