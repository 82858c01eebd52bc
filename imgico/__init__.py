"""Конвертация изображений в ICO и SVG со встроенным PNG."""
from imgico.controllers.app_controller import AppController, imgico, imgsvg
from imgico.errors import EmptyIconError, EncodingError, InvalidSizeError, RenderError
from imgico.models.image_model import ImageSource, RenderedImage, RenderResult
from imgico.models.options import IcoOptions, ResizeOptions, SvgOptions
from imgico.services.ico_service import IcoService
from imgico.services.svg_service import SvgService

__version__ = "1.0.0"

__all__ = [
    "AppController",
    "EmptyIconError",
    "EncodingError",
    "IcoOptions",
    "IcoService",
    "ImageSource",
    "InvalidSizeError",
    "RenderError",
    "RenderResult",
    "RenderedImage",
    "ResizeOptions",
    "SvgOptions",
    "SvgService",
    "imgico",
    "imgsvg",
]
