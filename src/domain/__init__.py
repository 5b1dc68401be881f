"""Domain layer: errors, constants and schemas."""

from .errors import ErrorCodes, LoaderError
from .schemas import (
    ParsedName,
    Resolution,
    TemplateSource,
)

__all__ = [
    "ErrorCodes",
    "LoaderError",
    "ParsedName",
    "Resolution",
    "TemplateSource",
]
