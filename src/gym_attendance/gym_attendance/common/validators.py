from __future__ import annotations

import io
import warnings

from PIL import Image, UnidentifiedImageError

from ..core.exceptions import ValidationError


def require_image(data: bytes | None) -> bytes:
    """Check that the payload decodes as an image. The bytes are returned untouched.

    Headers declaring more pixels than Pillow's bomb limit are rejected too.
    """
    if not data:
        raise ValidationError("Por favor envía una imagen.")

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", Image.DecompressionBombWarning)
            with Image.open(io.BytesIO(data)) as img:
                img.verify()
    except (Image.DecompressionBombError, Image.DecompressionBombWarning) as e:
        raise ValidationError("La imagen enviada es demasiado grande.") from e
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ValidationError("El archivo enviado no es una imagen válida.") from e
    return data


def parse_optional_int(value: str | None, field_name: str) -> int | None:
    if value is None or value == "":
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} debe ser un número entero") from e
    if parsed <= 0:
        raise ValidationError(f"{field_name} debe ser positivo")
    return parsed
