"""Known products and the upstream images their tags are listed from."""

from __future__ import annotations

from collections.abc import Mapping

from imgver.core.result import Err, Ok, Result
from imgver.versions.errors import UnknownProduct

__all__ = ["BUILTIN_IMAGES", "known_images", "resolve_image"]


BUILTIN_IMAGES: Mapping[str, str] = {
    "elasticsearch": "docker.elastic.co/elasticsearch/elasticsearch",
    "opensearch": "docker.io/opensearchproject/opensearch",
}


def known_images(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    """Built-in products merged with configured ones (configured entries win)."""
    images = dict(BUILTIN_IMAGES)
    if extra:
        images.update(extra)
    return images


def resolve_image(
    product: str,
    extra: Mapping[str, str] | None = None,
) -> Result[str, UnknownProduct]:
    images = known_images(extra)
    image = images.get(product)
    if image is None:
        return Err(UnknownProduct(name=product, available=tuple(sorted(images))))
    return Ok(image)
