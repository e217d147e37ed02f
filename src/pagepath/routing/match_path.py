"""Router match patterns for client-only page paths.

Bracketed segments in a page file path become router tokens::

    [...]       -> *        (anonymous splat)
    [...name]   -> *name    (named splat)
    [name]      -> :name    (single named segment)
"""

import re
from dataclasses import dataclass

# One bracketed placeholder; the optional "..." marks a splat
_BRACKET_RE = re.compile(r"\[(\.\.\.)?([^\]]*)\]")


@dataclass(frozen=True, slots=True)
class MatchPath:
    """Result of deriving a router pattern from a page path.

    Attributes:
        pattern: The path with every bracketed segment replaced.  Equal
            to the input when nothing was replaced.
        has_match: True if at least one placeholder was substituted.
    """

    pattern: str
    has_match: bool

    @property
    def match_path(self) -> str | None:
        """The router pattern, or ``None`` for a literal route."""
        return self.pattern if self.has_match else None


def _replace(match: re.Match[str]) -> str:
    splat, name = match.groups()
    if splat:
        return f"*{name}"
    return f":{name}"


def derive_pattern(template_path: str) -> MatchPath:
    """Derive a router pattern from a page path with ``[...]`` segments.

    All placeholders are replaced in a single left-to-right pass.  The
    name inside the brackets is not validated, and an unterminated ``[``
    is left as literal text.

    Examples::

        derive_pattern("baz/123/[bar]").pattern       -> "baz/123/:bar"
        derive_pattern("/products/[id]/[...page]")    -> "/products/:id/*page"
        derive_pattern("about").match_path            -> None
    """
    pattern, count = _BRACKET_RE.subn(_replace, template_path)
    return MatchPath(pattern=pattern, has_match=count > 0)
