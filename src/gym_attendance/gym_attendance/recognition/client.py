from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol

import requests

from ..core.constants import (
    DEFAULT_CONFIDENCE_THRESHOLD,
    DEFAULT_DETECTION_MODEL,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_PERSON_GROUP_ID,
    DEFAULT_RECOGNITION_MODEL,
)
from ..core.exceptions import ExternalServiceFailure
from .model import DetectedFace, FaceRectangle, IdentifyCandidate

logger = logging.getLogger(__name__)


class FaceRecognizer(Protocol):
    def detect(self, image: bytes) -> List[DetectedFace]:
        raise NotImplementedError

    def identify(self, face_id: str) -> Optional[IdentifyCandidate]:
        """Best candidate above the confidence threshold, or None."""

        raise NotImplementedError


@dataclass(frozen=True)
class FaceApiConfig:
    endpoint: str
    key: str
    person_group_id: str = DEFAULT_PERSON_GROUP_ID
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    recognition_model: str = DEFAULT_RECOGNITION_MODEL
    detection_model: str = DEFAULT_DETECTION_MODEL
    timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS


def _error_message(response: requests.Response) -> str:
    # Face API errors look like {"error": {"code": "...", "message": "..."}}.
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or ""
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return f"{error.get('code', '')}: {error.get('message', '')}".strip(": ")
    return str(body)


class AzureFaceClient(FaceRecognizer):
    """Minimal Face API v1.0 REST client (detect + identify)."""

    def __init__(self, config: FaceApiConfig, *, session: requests.Session | None = None):
        self._config = config
        self._base_url = config.endpoint.rstrip("/") + "/face/v1.0"
        self._session = session or requests.Session()

    def _post(self, path: str, **kwargs: Any) -> Any:
        headers = {"Ocp-Apim-Subscription-Key": self._config.key}
        headers.update(kwargs.pop("headers", {}))
        try:
            response = self._session.post(
                f"{self._base_url}/{path}",
                headers=headers,
                timeout=self._config.timeout,
                **kwargs,
            )
        except requests.Timeout as e:
            raise ExternalServiceFailure(f"Face API sin respuesta tras {self._config.timeout}s") from e
        except requests.RequestException as e:
            raise ExternalServiceFailure(f"Face API no disponible: {e}") from e

        if response.status_code >= 400:
            message = _error_message(response)
            logger.error("Face API %s -> %s %s", path, response.status_code, message)
            raise ExternalServiceFailure(f"Face API {response.status_code}: {message}")

        try:
            return response.json()
        except ValueError as e:
            raise ExternalServiceFailure("Face API devolvió una respuesta no JSON") from e

    def detect(self, image: bytes) -> List[DetectedFace]:
        payload = self._post(
            "detect",
            params={
                "returnFaceId": "true",
                "returnFaceLandmarks": "false",
                "returnFaceAttributes": "emotion",
                "recognitionModel": self._config.recognition_model,
                "detectionModel": self._config.detection_model,
            },
            headers={"Content-Type": "application/octet-stream"},
            data=image,
        )
        if not isinstance(payload, list):
            raise ExternalServiceFailure("Face API detect: se esperaba una lista")

        try:
            return [
                DetectedFace(
                    face_id=str(item["faceId"]),
                    rectangle=FaceRectangle(
                        top=int(item["faceRectangle"]["top"]),
                        left=int(item["faceRectangle"]["left"]),
                        width=int(item["faceRectangle"]["width"]),
                        height=int(item["faceRectangle"]["height"]),
                    ),
                    emotion=dict((item.get("faceAttributes") or {}).get("emotion") or {}),
                )
                for item in payload
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise ExternalServiceFailure(f"Face API detect: respuesta mal formada ({e})") from e

    def identify(self, face_id: str) -> Optional[IdentifyCandidate]:
        payload = self._post(
            "identify",
            json={
                "faceIds": [face_id],
                "personGroupId": self._config.person_group_id,
                "maxNumOfCandidatesReturned": 1,
                "confidenceThreshold": self._config.confidence_threshold,
            },
        )
        if not isinstance(payload, list):
            raise ExternalServiceFailure("Face API identify: se esperaba una lista")
        if not payload:
            return None

        candidates = payload[0].get("candidates") or []
        if not candidates:
            return None
        best = max(candidates, key=lambda c: float(c.get("confidence", 0.0)))
        confidence = float(best.get("confidence", 0.0))
        if confidence < self._config.confidence_threshold:
            return None
        return IdentifyCandidate(person_id=str(best["personId"]), confidence=confidence)
