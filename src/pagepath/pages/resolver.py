"""Resolution of the ``path`` field on collection node types.

Answers "what is this data node's page path" for node types that have a
collection template, and reads route parameters back out of a resolved
path.
"""

from collections.abc import Callable, Mapping
from typing import Any

from pagepath.config import PagesConfig
from pagepath.pages.collections import CollectionRegistry
from pagepath.pages.paths import create_path, derive_path
from pagepath.pages.validate import validate_path_query
from pagepath.routing.params import extract_params

PathFieldResolver = Callable[[Mapping[str, Any], str], str]


class PathResolver:
    """Resolves page paths for nodes of known collection types.

    Args:
        registry: Known collections, built once at startup.
        config: Page creator configuration (for recognised extensions).
    """

    __slots__ = ("_config", "_registry")

    def __init__(self, registry: CollectionRegistry, config: PagesConfig) -> None:
        self._registry = registry
        self._config = config

    def path_field(self, type_name: str) -> PathFieldResolver | None:
        """Return a ``path`` field resolver for *type_name*.

        Returns ``None`` when no collection template queries the type,
        in which case the type gets no ``path`` field.
        """
        if self._registry.template_for(type_name) is None:
            return None
        return self.resolve

    def resolve(self, source: Mapping[str, Any], file_path: str) -> str:
        """Derive the page path of *source* from the template *file_path*.

        Raises ``ValidationError`` before deriving anything if
        *file_path* does not have a recognised extension.
        """
        validate_path_query(file_path, self._config.extensions)
        return derive_path(file_path, source)

    def route_params(self, type_name: str, resolved_path: str) -> dict[str, str | None]:
        """Extract the collection parameters of *resolved_path*.

        Both paths are compared in URL form, so the template
        ``products/{Product.name}.js`` lines up with ``products/blue-shoe``
        as returned by :meth:`resolve` as well as ``/products/blue-shoe/``.
        Unknown types give an empty mapping.
        """
        template = self._registry.template_for(type_name)
        if template is None:
            return {}
        url_path = "/" + resolved_path.strip("/") + "/"
        return extract_params(create_path(template), url_path)
