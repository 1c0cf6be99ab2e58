import logging

from pixcode.render.base import QRRenderer
from pixcode.settings import settings

logger = logging.getLogger(__name__)


def get_renderer() -> QRRenderer:
    backend = settings.qr_renderer

    if backend == "png":
        from pixcode.render.png import PngQRRenderer

        logger.info("Using QR renderer: png")
        return PngQRRenderer(
            box_size=settings.qr_box_size,
            border=settings.qr_border,
            error_correction=settings.qr_error_correction,
        )

    if backend == "svg":
        from pixcode.render.svg import SvgQRRenderer

        logger.info("Using QR renderer: svg")
        return SvgQRRenderer(
            box_size=settings.qr_box_size,
            border=settings.qr_border,
            error_correction=settings.qr_error_correction,
        )

    raise ValueError(f"Unsupported QR renderer: {backend}")
