"""Tests for pagepath.pages.resolver — path field resolution."""

import pytest

from pagepath.config import PagesConfig
from pagepath.errors import ValidationError
from pagepath.pages.collections import CollectionRegistry
from pagepath.pages.resolver import PathResolver


@pytest.fixture
def resolver() -> PathResolver:
    registry = CollectionRegistry()
    registry.register("allProduct", "products/{Product.name}.js")
    return PathResolver(registry, PagesConfig())


class TestPathField:
    def test_known_type(self, resolver: PathResolver) -> None:
        assert resolver.path_field("Product") is not None

    def test_unknown_type(self, resolver: PathResolver) -> None:
        assert resolver.path_field("Author") is None

    def test_field_resolves(self, resolver: PathResolver) -> None:
        field = resolver.path_field("Product")
        assert field is not None
        assert field({"name": "Blue Shoe"}, "products/{Product.name}.js") == "products/blue-shoe"


class TestResolve:
    def test_validates_before_deriving(self, resolver: PathResolver) -> None:
        with pytest.raises(ValidationError):
            resolver.resolve({"name": "Blue Shoe"}, "products/{Product.name}.md")

    def test_custom_extensions(self) -> None:
        resolver = PathResolver(CollectionRegistry(), PagesConfig(extensions=(".md",)))
        assert resolver.resolve({"name": "Post"}, "/{Page.name}.md") == "/post"


class TestRouteParams:
    def test_params_from_resolved_path(self, resolver: PathResolver) -> None:
        assert resolver.route_params("Product", "/products/blue-shoe/") == {"name": "blue-shoe"}

    def test_without_trailing_slash(self, resolver: PathResolver) -> None:
        assert resolver.route_params("Product", "/products/blue-shoe") == {"name": "blue-shoe"}

    def test_unknown_type(self, resolver: PathResolver) -> None:
        assert resolver.route_params("Author", "/authors/jane") == {}

    def test_reads_back_resolved_path(self, resolver: PathResolver) -> None:
        resolved = resolver.resolve({"name": "Blue Shoe"}, "products/{Product.name}.js")
        assert resolved == "products/blue-shoe"
        assert resolver.route_params("Product", resolved) == {"name": "blue-shoe"}
