"""Registry of known collection queries.

Maps a collection query name (``allProduct``) to the relative path of the
page template that queries it.  Built once at startup by the discovery
pass and handed to :class:`~pagepath.pages.resolver.PathResolver`.
"""

import logging
from collections.abc import Iterator

logger = logging.getLogger("pagepath.collections")


def collection_query_name(type_name: str) -> str:
    """Return the collection query name for a node type."""
    return f"all{type_name}"


class CollectionRegistry:
    """Lookup table from collection query name to template file path.

    Usage::

        registry = CollectionRegistry()
        registry.register("allProduct", "products/{Product.name}.js")
        registry.template_for("Product")  # "products/{Product.name}.js"
    """

    __slots__ = ("_templates",)

    def __init__(self) -> None:
        self._templates: dict[str, str] = {}

    def register(self, query_name: str, relative_path: str) -> None:
        """Record *relative_path* as the template for *query_name*.

        A later registration for the same name replaces the earlier one.
        """
        previous = self._templates.get(query_name)
        if previous is not None and previous != relative_path:
            logger.debug(
                "Collection %s moved from %s to %s", query_name, previous, relative_path
            )
        else:
            logger.debug("Registered collection %s -> %s", query_name, relative_path)
        self._templates[query_name] = relative_path

    def get(self, query_name: str) -> str | None:
        """Return the template path registered for *query_name*, if any."""
        return self._templates.get(query_name)

    def template_for(self, type_name: str) -> str | None:
        """Return the template path for a node type, if it has one."""
        return self._templates.get(collection_query_name(type_name))

    def __contains__(self, query_name: object) -> bool:
        return query_name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)
