from __future__ import annotations

from imgver.core.result import Err, Ok
from imgver.registry.products import BUILTIN_IMAGES, known_images, resolve_image
from imgver.versions.errors import UnknownProduct


def test_builtin_products() -> None:
    assert resolve_image("elasticsearch") == Ok("docker.elastic.co/elasticsearch/elasticsearch")
    assert resolve_image("opensearch") == Ok("docker.io/opensearchproject/opensearch")


def test_unknown_product_lists_available() -> None:
    result = resolve_image("solr")
    assert result == Err(UnknownProduct(name="solr", available=("elasticsearch", "opensearch")))


def test_configured_images_extend_and_override() -> None:
    extra = {"mysearch": "docker.io/example/mysearch", "opensearch": "ghcr.io/mirror/opensearch"}
    images = known_images(extra)
    assert images["mysearch"] == "docker.io/example/mysearch"
    assert images["opensearch"] == "ghcr.io/mirror/opensearch"
    assert resolve_image("mysearch", extra) == Ok("docker.io/example/mysearch")
    assert BUILTIN_IMAGES["opensearch"] == "docker.io/opensearchproject/opensearch"
