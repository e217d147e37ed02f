"""Filesystem-based page planning and collection path resolution.

The ``pages/`` directory structure defines URL paths::

    src/pages/
      index.js                   # /
      about.tsx                  # /about/
      app/
        [...].js                 # /app/            (match path /app/*/)
      products/
        [id].js                  # /products/[id]/  (match path /products/:id/)
        {Product.name}.js        # collection builder for allProduct
"""

from pagepath.pages.collections import CollectionRegistry, collection_query_name
from pagepath.pages.paths import create_path, derive_path, slugify
from pagepath.pages.planner import plan_page, plan_removal
from pagepath.pages.resolver import PathResolver
from pagepath.pages.types import PageEntry, PageKind, PageRemoval
from pagepath.pages.validate import validate_path_query

__all__ = [
    "CollectionRegistry",
    "PageEntry",
    "PageKind",
    "PageRemoval",
    "PathResolver",
    "collection_query_name",
    "create_path",
    "derive_path",
    "plan_page",
    "plan_removal",
    "slugify",
    "validate_path_query",
]
