"""Data models for filesystem-based page planning.

Immutable frozen dataclasses describing the pages a discovered file
should create or remove.  The caller owns the side effects.
"""

from dataclasses import dataclass
from enum import Enum


class PageKind(Enum):
    """How a page file turns into routes."""

    STATIC = "static"
    CLIENT_ONLY = "client-only"
    COLLECTION = "collection"


@dataclass(frozen=True, slots=True)
class PageEntry:
    """A page to register for a discovered component file.

    Attributes:
        path: URL path (e.g., ``/products/[id]/``).
        component: Path of the component file (pages dir + relative path).
        kind: Static, client-only (``[param]``) or collection (``{Type.field}``).
        match_path: Router pattern for client-only pages (e.g.,
            ``/products/:id/``), ``None`` otherwise.
    """

    path: str
    component: str
    kind: PageKind = PageKind.STATIC
    match_path: str | None = None


@dataclass(frozen=True, slots=True)
class PageRemoval:
    """A page to delete after its component file was removed."""

    path: str
    component: str
