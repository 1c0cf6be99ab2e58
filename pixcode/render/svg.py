import logging
from io import BytesIO

import qrcode
from qrcode.image.svg import SvgPathImage

from pixcode.render.base import QRRenderer, error_correction_level

logger = logging.getLogger(__name__)


class SvgQRRenderer(QRRenderer):
    """Vector output; does not need Pillow."""

    content_type = "image/svg+xml"

    def __init__(self, box_size: int = 10, border: int = 2, error_correction: str = "M") -> None:
        self.box_size = box_size
        self.border = border
        self.error_correction = error_correction_level(error_correction)

    def render(self, payload: str) -> bytes:
        qr = qrcode.QRCode(
            version=None,
            error_correction=self.error_correction,
            box_size=self.box_size,
            border=self.border,
            image_factory=SvgPathImage,
        )
        qr.add_data(payload)
        qr.make(fit=True)

        buf = BytesIO()
        qr.make_image().save(buf)
        data = buf.getvalue()
        logger.debug("Rendered SVG QR code: version=%d size=%d bytes", qr.version, len(data))
        return data
