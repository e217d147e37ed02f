"""Collection route parameters.

Reads the values of ``{Type.field}`` placeholders out of a resolved URL
path, e.g. ``/foo/{Product.id}`` + ``/foo/123`` -> ``{"id": "123"}``.
"""

import re

# Leading type discriminator, e.g. "Product." in "{Product.id}"
_TYPE_PREFIX_RE = re.compile(r"^[a-zA-Z]+\.")


def collection_key(segment: str) -> str:
    """Return the parameter key of a ``{Type.field}`` segment.

    Strips the opening brace, one leading ``Type.`` discriminator and the
    closing brace.  Only the first discriminator is removed, so
    ``{Type.a.b}`` gives ``a.b``.  The key is not validated.
    """
    key = segment.replace("{", "", 1)
    key = _TYPE_PREFIX_RE.sub("", key, count=1)
    return key.replace("}", "", 1)


def extract_params(template_path: str, resolved_path: str) -> dict[str, str | None]:
    """Map each collection placeholder in *template_path* to its value.

    Segments are matched by position only.  Template segments that are
    not placeholders are skipped.  When *resolved_path* has fewer
    segments, the missing positions map to ``None``; nothing is raised.
    """
    params: dict[str, str | None] = {}
    url_parts = resolved_path.split("/")

    for i, part in enumerate(template_path.split("/")):
        if not part.startswith("{"):
            continue
        params[collection_key(part)] = url_parts[i] if i < len(url_parts) else None

    return params
