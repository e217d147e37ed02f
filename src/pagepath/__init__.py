"""pagepath — page file paths to router patterns, and back.

Turns bracketed page paths into router match patterns and reads
collection parameters out of resolved URL paths.

Basic usage::

    from pagepath import derive_pattern, extract_params

    derive_pattern("/products/[id]/[...page]").pattern   # "/products/:id/*page"
    extract_params("foo/{Product.id}", "foo/123")        # {"id": "123"}
"""

import importlib

__version__ = "0.1.0.dev0"
__all__ = [
    "CollectionRegistry",
    "ConfigurationError",
    "MatchPath",
    "PageEntry",
    "PageKind",
    "PagePathError",
    "PagesConfig",
    "PathResolver",
    "ValidationError",
    "create_path",
    "derive_path",
    "derive_pattern",
    "extract_params",
    "plan_page",
    "validate_path_query",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "CollectionRegistry": "pagepath.pages.collections",
    "ConfigurationError": "pagepath.errors",
    "MatchPath": "pagepath.routing.match_path",
    "PageEntry": "pagepath.pages.types",
    "PageKind": "pagepath.pages.types",
    "PagePathError": "pagepath.errors",
    "PagesConfig": "pagepath.config",
    "PathResolver": "pagepath.pages.resolver",
    "ValidationError": "pagepath.errors",
    "create_path": "pagepath.pages.paths",
    "derive_path": "pagepath.pages.paths",
    "derive_pattern": "pagepath.routing.match_path",
    "extract_params": "pagepath.routing.params",
    "plan_page": "pagepath.pages.planner",
    "validate_path_query": "pagepath.pages.validate",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pagepath`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
