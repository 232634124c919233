"""카메라/분류 모델 관련 도메인 예외."""

from recicla.domain.exceptions.base import DomainError


class CameraUnavailableError(DomainError):
    """권한 거부 또는 일치하는 카메라 장치가 없음."""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        message = "Camera unavailable"
        if reason:
            message = f"Camera unavailable: {reason}"
        super().__init__(message)


class ModelNotReadyError(DomainError):
    """분류 모델이 아직 로드되지 않음."""

    def __init__(self) -> None:
        super().__init__("Classification model is not loaded yet. Try again in a moment.")


class TorchUnsupportedError(DomainError):
    """현재 카메라 상태에서 토치를 제어할 수 없음.

    예외로 던지지 않고 결과 객체에 담아 호출자에게 보고합니다.
    """

    def __init__(self, reason: str = "Torch is only available on an active back camera") -> None:
        super().__init__(reason)
