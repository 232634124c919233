"""OpenCV 기반 프레임 인코딩/디코딩."""

from __future__ import annotations

import cv2
import numpy as np

from recicla.application.classify.ports import FrameDecoderPort
from recicla.application.common.exceptions import InvalidImageError
from recicla.domain.value_objects import Frame

JPEG_QUALITY = 90


def frame_from_array(array: np.ndarray | None) -> Frame:
    """numpy 배열(BGR)을 Frame으로 감쌉니다."""
    if array is None or array.size == 0:
        return Frame.empty()
    height, width = array.shape[:2]
    return Frame(data=array, width=int(width), height=int(height))


def encode_jpeg(frame: Frame) -> bytes:
    """프레임을 JPEG 바이트로 인코딩합니다."""
    ok, buffer = cv2.imencode(".jpg", frame.data, [int(cv2.IMWRITE_JPEG_QUALITY), JPEG_QUALITY])
    if not ok:
        raise ValueError("JPEG encoding failed")
    return buffer.tobytes()


class OpenCVFrameDecoder(FrameDecoderPort):
    """이미지 바이트 → Frame."""

    def decode(self, payload: bytes) -> Frame:
        array = cv2.imdecode(np.frombuffer(payload, dtype=np.uint8), cv2.IMREAD_COLOR)
        frame = frame_from_array(array)
        if frame.is_empty:
            raise InvalidImageError("unsupported image format")
        return frame
