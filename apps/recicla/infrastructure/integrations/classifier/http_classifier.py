"""원격 분류 모델 HTTP 클라이언트.

호스팅된 이미지 분류 모델 호출.
- 메타데이터: GET {endpoint}/metadata.json → {"labels": [...]}
- 추론: POST {endpoint}/predict (image/jpeg) →
  [{"className": str, "probability": float}, ...] 또는 {"predictions": [...]}
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

import httpx

from recicla.application.classify.ports import ClassifierPort
from recicla.domain.value_objects import Frame, Prediction
from recicla.infrastructure.camera.frame_codec import encode_jpeg

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


class HttpClassifier(ClassifierPort):
    """원격 분류기."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_TIMEOUT,
        encoder: Callable[[Frame], bytes] = encode_jpeg,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._timeout = timeout
        self._encoder = encoder
        self._labels: list[str] = []
        self._ready = False
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def labels(self) -> list[str]:
        return list(self._labels)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(base_url=self._endpoint, timeout=self._timeout)
        return self._client

    async def load(self) -> None:
        """모델 메타데이터를 받아 준비 상태로 전환합니다."""
        client = await self._get_client()
        response = await client.get("/metadata.json")
        response.raise_for_status()
        metadata = response.json()
        self._labels = [str(label) for label in metadata.get("labels", [])]
        self._ready = True
        logger.info("Remote classifier loaded", extra={"labels_count": len(self._labels)})

    async def predict(self, frame: Frame) -> list[Prediction]:
        client = await self._get_client()
        payload = self._encoder(frame)
        response = await client.post(
            "/predict", content=payload, headers={"Content-Type": "image/jpeg"}
        )
        response.raise_for_status()
        return self._parse_predictions(response.json())

    @staticmethod
    def _parse_predictions(data: Any) -> list[Prediction]:
        items = data.get("predictions", []) if isinstance(data, dict) else data
        predictions: list[Prediction] = []
        for item in items or []:
            label = item.get("className", item.get("label"))
            probability = item.get("probability")
            if label is None or probability is None:
                continue
            predictions.append(Prediction(label=str(label), probability=float(probability)))
        return predictions

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
        self._ready = False
