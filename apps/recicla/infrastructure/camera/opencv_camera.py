"""OpenCV 카메라 어댑터.

facing 모드를 장치 인덱스로 매핑합니다 (front/back).
OpenCV는 토치 제어를 제공하지 않으므로 supports_torch는 False입니다.
"""

from __future__ import annotations

import asyncio
import logging
import threading

import cv2

from recicla.application.classify.ports import CameraDevicePort, CameraStreamPort
from recicla.domain.enums import FacingMode
from recicla.domain.exceptions import CameraUnavailableError, TorchUnsupportedError
from recicla.domain.value_objects import Frame
from recicla.infrastructure.camera.frame_codec import frame_from_array

logger = logging.getLogger(__name__)


class OpenCVCameraStream(CameraStreamPort):
    """cv2.VideoCapture 스트림.

    블로킹 호출은 스레드로 넘기고, 읽기/해제는 락으로 직렬화합니다.
    """

    def __init__(self, capture: cv2.VideoCapture, device_index: int) -> None:
        self._capture = capture
        self._device_index = device_index
        self._io_lock = threading.Lock()
        self._stopped = False

    @property
    def supports_torch(self) -> bool:
        return False

    def _read(self) -> Frame:
        with self._io_lock:
            if self._stopped:
                return Frame.empty()
            ok, array = self._capture.read()
        if not ok:
            return Frame.empty()
        return frame_from_array(array)

    async def read_frame(self) -> Frame:
        return await asyncio.to_thread(self._read)

    async def set_torch(self, on: bool) -> None:
        raise TorchUnsupportedError("OpenCV capture has no torch control")

    def _release(self) -> None:
        with self._io_lock:
            if self._stopped:
                return
            self._stopped = True
            self._capture.release()

    async def stop(self) -> None:
        await asyncio.to_thread(self._release)
        logger.debug("Camera device released", extra={"device_index": self._device_index})


class OpenCVCameraDevice(CameraDevicePort):
    """OpenCV 카메라 장치."""

    def __init__(self, front_index: int = 0, back_index: int = 1) -> None:
        self._indices = {FacingMode.USER: front_index, FacingMode.ENVIRONMENT: back_index}

    def device_index(self, facing: FacingMode) -> int:
        return self._indices[facing]

    def _open(self, index: int, width: int, height: int) -> cv2.VideoCapture:
        capture = cv2.VideoCapture(index)
        if not capture.isOpened():
            capture.release()
            raise CameraUnavailableError(f"no camera at index {index}")
        capture.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        capture.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
        return capture

    async def open(self, facing: FacingMode, width: int, height: int) -> CameraStreamPort:
        index = self.device_index(facing)
        capture = await asyncio.to_thread(self._open, index, width, height)
        logger.info(
            "Camera device opened",
            extra={"facing": facing.value, "device_index": index, "width": width, "height": height},
        )
        return OpenCVCameraStream(capture, index)
