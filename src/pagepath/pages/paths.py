"""URL paths for page files and collection nodes.

``create_path`` maps a page file to the URL it is served at;
``derive_path`` fills a collection template with a data node's fields.
"""

import logging
import posixpath
import re
import unicodedata
from collections.abc import Mapping
from typing import Any

from pagepath.routing.params import collection_key

logger = logging.getLogger("pagepath.pages")

_EXTENSION_RE = re.compile(r"\.[a-zA-Z0-9]+$")
_COLLECTION_RE = re.compile(r"\{.*\}")
_CLIENT_ONLY_RE = re.compile(r"\[.*\]")
_PLACEHOLDER_RE = re.compile(r"\{[^}]*\}")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def is_collection_path(path: str) -> bool:
    """True if *path* contains a ``{Type.field}`` placeholder."""
    return _COLLECTION_RE.search(path) is not None


def is_client_only_path(path: str) -> bool:
    """True if *path* contains a ``[param]`` placeholder."""
    return _CLIENT_ONLY_RE.search(path) is not None


def remove_file_extension(file_path: str) -> str:
    """Drop a trailing ``.ext``.  A trailing ``{...}`` is left alone."""
    return _EXTENSION_RE.sub("", file_path)


def create_path(file_path: str) -> str:
    """Return the URL path a page file is served at.

    Examples::

        create_path("about.tsx")      -> "/about/"
        create_path("blog/index.js")  -> "/blog/"
        create_path("index.js")       -> "/"
    """
    directory, base = posixpath.split(file_path)
    name = remove_file_extension(base)
    if name == "index":
        name = ""
    return posixpath.join("/", directory, name, "")


def slugify(value: Any) -> str:
    """Lower-case *value* and join its alphanumeric runs with ``-``."""
    text = unicodedata.normalize("NFKD", str(value))
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    return _NON_SLUG_RE.sub("-", text).strip("-")


def _get_field(node: Mapping[str, Any], field_path: str) -> Any:
    value: Any = node
    for name in field_path.split("."):
        if not isinstance(value, Mapping) or name not in value:
            return None
        value = value[name]
    return value


def derive_path(template_path: str, node: Mapping[str, Any]) -> str:
    """Fill a collection template with the fields of *node*.

    The file extension is removed, then each ``{Type.field}`` placeholder
    is replaced by the slugified value of ``field`` on *node*.  Dotted
    field paths walk nested mappings.  A field the node does not have is
    logged and its placeholder left in place.

    Example::

        derive_path("products/{Product.name}.js", {"name": "Blue Shoe"})
        -> "products/blue-shoe"
    """

    def _fill(match: re.Match[str]) -> str:
        key = collection_key(match.group(0))
        value = _get_field(node, key)
        if value is None:
            logger.warning(
                "Could not find value for %r on node while deriving path from %r",
                key,
                template_path,
            )
            return match.group(0)
        return slugify(value)

    return _PLACEHOLDER_RE.sub(_fill, remove_file_extension(template_path))
