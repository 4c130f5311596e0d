from __future__ import annotations

import logging
from datetime import datetime

from ..attendance.model import CreateSession
from ..attendance.service import AttendanceService
from ..common.validators import require_image
from ..core.exceptions import ExternalServiceFailure, InvalidInput, NotFound
from ..emotions.extractor import dominant_emotion
from ..members.repository import MemberRepository
from ..recognition.client import FaceRecognizer
from ..recognition.model import select_primary_face
from .model import (
    CHECK_IN_MESSAGE,
    CHECK_OUT_MESSAGE,
    MEMBER_DESYNC_MESSAGE,
    NO_FACE_MESSAGE,
    UNRECOGNIZED_MESSAGE,
    CheckinOutcome,
    OutcomeKind,
)

logger = logging.getLogger(__name__)


class FaceCheckinService:
    """Use case: a camera image arrives at the gym door.

    detect faces -> dominant emotion of the primary face -> identify ->
    local member lookup -> attendance toggle.
    """

    def __init__(self, recognizer: FaceRecognizer, members: MemberRepository, attendance: AttendanceService):
        self._recognizer = recognizer
        self._members = members
        self._attendance = attendance

    def process_image(
        self,
        image: bytes | None,
        *,
        room_id: int | None = None,
        now: datetime | None = None,
    ) -> CheckinOutcome:
        image = require_image(image)

        faces = self._recognizer.detect(image)
        if not faces:
            logger.info("Sin caras en la imagen (%d bytes)", len(image))
            return CheckinOutcome(kind=OutcomeKind.NO_FACE, message=NO_FACE_MESSAGE)

        face = select_primary_face(faces)
        if len(faces) > 1:
            logger.info("%d caras detectadas; se procesa solo la principal %s", len(faces), face.face_id)

        if not face.emotion:
            raise ExternalServiceFailure("Face API no devolvió atributos de emoción")
        try:
            emotion = dominant_emotion(face.emotion)
        except InvalidInput as e:
            raise ExternalServiceFailure(f"Face API devolvió emociones inválidas: {e}") from e

        candidate = self._recognizer.identify(face.face_id)
        if candidate is None:
            logger.info("Cara %s no reconocida (emocion=%s)", face.face_id, emotion)
            return CheckinOutcome(kind=OutcomeKind.UNRECOGNIZED, message=UNRECOGNIZED_MESSAGE, emotion=emotion)

        member = self._members.get_by_person_id(candidate.person_id)
        if member is None:
            logger.error("Persona %s reconocida por Face API pero ausente en la base local", candidate.person_id)
            raise NotFound(MEMBER_DESYNC_MESSAGE)

        mutation = self._attendance.register_passage(member, emotion, room_id=room_id, now=now)
        template = CHECK_IN_MESSAGE if isinstance(mutation, CreateSession) else CHECK_OUT_MESSAGE
        return CheckinOutcome(
            kind=OutcomeKind.RECOGNIZED,
            message=template.format(nombre=member.full_name, emocion=emotion),
            emotion=emotion,
            member=member,
            mutation=mutation,
        )
