"""Conversion error taxonomy.

ParseError aborts a conversion. MalformedGeometryWarning is never raised by the
converter: it is recorded on the conversion context and the affected command
or reference is skipped.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for fatal conversion failures."""


class ParseError(ConversionError):
    """Input is not well-formed markup or has no <svg> viewport element."""


class MalformedGeometryWarning(UserWarning):
    """A path command, shape or paint reference was skipped."""
