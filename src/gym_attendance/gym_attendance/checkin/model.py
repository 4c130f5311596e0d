from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..attendance.model import AttendanceMutation
from ..members.model import Member

NO_FACE_MESSAGE = "No se detectó ninguna cara."
UNRECOGNIZED_MESSAGE = "Usuario no reconocido. ¿Desea registrar como invitado?"
MEMBER_DESYNC_MESSAGE = "Error: Socio en FaceAPI no encontrado en SQL."
CHECK_IN_MESSAGE = "Bienvenido {nombre}. Emoción entrada: {emocion}"
CHECK_OUT_MESSAGE = "Adiós {nombre}. Emoción salida: {emocion}"


class OutcomeKind(str, Enum):
    NO_FACE = "NO_FACE"
    UNRECOGNIZED = "UNRECOGNIZED"
    RECOGNIZED = "RECOGNIZED"


@dataclass(frozen=True)
class CheckinOutcome:
    """Result of processing one camera image."""

    kind: OutcomeKind
    message: str
    emotion: Optional[str] = None
    member: Optional[Member] = None
    mutation: Optional[AttendanceMutation] = None

    def to_payload(self) -> dict:
        if self.kind is OutcomeKind.NO_FACE:
            return {"mensaje": self.message}
        if self.kind is OutcomeKind.UNRECOGNIZED:
            return {"esSocio": False, "mensaje": self.message, "emocion": self.emotion}
        return {
            "esSocio": True,
            "nombre": self.member.full_name if self.member else None,
            "mensaje": self.message,
            "emocion": self.emotion,
            "accion": self.mutation.action.value if self.mutation else None,
        }
