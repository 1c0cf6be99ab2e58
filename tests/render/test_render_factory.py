from unittest.mock import patch

import pytest

from pixcode.render.png import PngQRRenderer
from pixcode.render.svg import SvgQRRenderer


class TestRendererFactory:
    @patch("pixcode.render.factory.settings")
    def test_png_renderer(self, mock_settings):
        mock_settings.qr_renderer = "png"
        mock_settings.qr_box_size = 4
        mock_settings.qr_border = 1
        mock_settings.qr_error_correction = "H"

        from pixcode.render.factory import get_renderer

        renderer = get_renderer()
        assert isinstance(renderer, PngQRRenderer)
        assert renderer.box_size == 4
        assert renderer.border == 1

    @patch("pixcode.render.factory.settings")
    def test_svg_renderer(self, mock_settings):
        mock_settings.qr_renderer = "svg"
        mock_settings.qr_box_size = 10
        mock_settings.qr_border = 2
        mock_settings.qr_error_correction = "M"

        from pixcode.render.factory import get_renderer

        assert isinstance(get_renderer(), SvgQRRenderer)

    @patch("pixcode.render.factory.settings")
    def test_unsupported_renderer(self, mock_settings):
        mock_settings.qr_renderer = "gif"

        from pixcode.render.factory import get_renderer

        with pytest.raises(ValueError, match="Unsupported QR renderer"):
            get_renderer()
