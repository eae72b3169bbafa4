"""SVG to Android VectorDrawable converter with transform flattening."""

from vectorflatten.engine import ConversionResult, convert, convert_document
from vectorflatten.errors import ConversionError, MalformedGeometryWarning, ParseError

__all__ = [
    "convert",
    "convert_document",
    "ConversionResult",
    "ConversionError",
    "MalformedGeometryWarning",
    "ParseError",
]

__version__ = "0.1.0"
