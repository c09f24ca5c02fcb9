"""Upstream image registry access: products and tag sources."""

from .products import BUILTIN_IMAGES, known_images, resolve_image
from .tags import (
    CraneTagSource,
    FileTagSource,
    StaticTagSource,
    TagSource,
    TagSourceError,
)

__all__ = [
    "BUILTIN_IMAGES",
    "known_images",
    "resolve_image",
    "CraneTagSource",
    "FileTagSource",
    "StaticTagSource",
    "TagSource",
    "TagSourceError",
]
