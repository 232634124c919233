"""Facing Mode Enum."""

from __future__ import annotations

from enum import Enum


class FacingMode(str, Enum):
    """카메라 방향.

    USER: 전면(셀피) 카메라, ENVIRONMENT: 후면 카메라.
    """

    USER = "user"
    ENVIRONMENT = "environment"

    @classmethod
    def parse(cls, raw: str) -> FacingMode:
        """'front'/'back' 별칭을 포함해 문자열을 파싱합니다.

        Raises:
            ValueError: 알 수 없는 값
        """
        value = raw.strip().lower()
        aliases = {"front": cls.USER, "back": cls.ENVIRONMENT}
        if value in aliases:
            return aliases[value]
        return cls(value)

    @property
    def opposite(self) -> FacingMode:
        return FacingMode.USER if self is FacingMode.ENVIRONMENT else FacingMode.ENVIRONMENT

    @property
    def is_back(self) -> bool:
        return self is FacingMode.ENVIRONMENT
