import base64
from abc import ABC, abstractmethod

from qrcode import constants

ERROR_CORRECTION_LEVELS = {
    "L": constants.ERROR_CORRECT_L,
    "M": constants.ERROR_CORRECT_M,
    "Q": constants.ERROR_CORRECT_Q,
    "H": constants.ERROR_CORRECT_H,
}


def error_correction_level(level: str) -> int:
    try:
        return ERROR_CORRECTION_LEVELS[level.upper()]
    except KeyError:
        raise ValueError(f"Unsupported error correction level: {level}") from None


class QRRenderer(ABC):
    content_type: str = "application/octet-stream"

    @abstractmethod
    def render(self, payload: str) -> bytes:
        """Render the payload text as an image and return its bytes."""
        ...

    def to_data_uri(self, payload: str) -> str:
        """Return the rendered image as a ``data:`` URI, ready for an <img> tag."""
        encoded = base64.b64encode(self.render(payload)).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"
