"""Camera HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CameraStartRequest(BaseModel):
    """카메라 시작 요청. facing: user | environment (front | back 허용)."""

    facing: str = "environment"


class CameraStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    state: str
    active: bool
    facing: str | None = None
    torch_on: bool = Field(False, alias="torchOn")
    supports_torch: bool = Field(False, alias="supportsTorch")
    session_id: int | None = Field(None, alias="sessionId")
    model_ready: bool = Field(False, alias="modelReady")


class FlashResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool
    torch_on: bool = Field(alias="torchOn")
    message: str | None = None
