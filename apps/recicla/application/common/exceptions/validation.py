"""검증 관련 예외."""

from recicla.application.common.exceptions.base import ApplicationError


class MissingCoordinatesError(ApplicationError):
    """위경도 좌표가 전달되지 않음."""

    def __init__(self) -> None:
        super().__init__("Coordenadas de localização são obrigatórias")


class ImageMissingError(ApplicationError):
    """분석할 이미지가 전달되지 않음."""

    def __init__(self) -> None:
        super().__init__("Imagem não fornecida")


class InvalidImageError(ApplicationError):
    """이미지를 디코딩할 수 없음."""

    def __init__(self, reason: str | None = None) -> None:
        message = "Imagem inválida"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidFacingModeError(ApplicationError):
    """유효하지 않은 facing 값."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid facing '{value}'. Allowed values: {allowed}.")
