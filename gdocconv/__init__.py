"""Convert Google Docs API documents into HTML."""

from .config import ConverterOptions, DEFAULT_STYLE_TAGS, load_options
from .convert import Converter, convert
from .dom_model import DomDocument, DomNode, dom_to_html
from .models import Document

__version__ = "0.1.0"

__all__ = [
    "Converter",
    "ConverterOptions",
    "DEFAULT_STYLE_TAGS",
    "Document",
    "DomDocument",
    "DomNode",
    "convert",
    "dom_to_html",
    "load_options",
]
