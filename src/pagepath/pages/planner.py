"""Page planning for discovered component files.

Decides, without touching the filesystem, which page a file under the
pages directory creates:

- ``[param]`` in the path makes a client-only page with a match path
- ``{Type.field}`` in the path makes a collection builder
- anything else is a static page

Files or directories starting with ``_`` or ``.``, ``template-*`` files,
TypeScript declaration files, and paths matching an ignore pattern never
become pages.
"""

import fnmatch
import logging
import posixpath
from collections.abc import Iterable
from pathlib import Path

from pagepath.config import PagesConfig
from pagepath.pages.paths import create_path, is_client_only_path, is_collection_path
from pagepath.pages.types import PageEntry, PageKind, PageRemoval
from pagepath.routing.match_path import derive_pattern

logger = logging.getLogger("pagepath.pages")


def is_valid_page_path(relative_path: str) -> bool:
    """True unless *relative_path* is a special, non-page component."""
    parts = [part for part in relative_path.split("/") if part]
    if any(part.startswith(("_", ".")) for part in parts):
        return False
    base = parts[-1] if parts else ""
    if base.startswith("template-"):
        return False
    return not base.endswith(".d.ts")


def _match_parts(parts: list[str], pattern_parts: list[str]) -> bool:
    if not pattern_parts:
        return not parts
    head, rest = pattern_parts[0], pattern_parts[1:]
    if head == "**":
        # zero or more whole segments
        return any(_match_parts(parts[i:], rest) for i in range(len(parts) + 1))
    if not parts or not fnmatch.fnmatchcase(parts[0], head):
        return False
    return _match_parts(parts[1:], rest)


def is_ignored(relative_path: str, patterns: Iterable[str]) -> bool:
    """True if *relative_path* matches any glob in *patterns*.

    Globs match segment by segment: ``*`` stays inside one segment and
    ``**`` spans any number of segments, including none, so
    ``**/*.spec.js`` also ignores a top-level ``post.spec.js``.
    """
    parts = [part for part in relative_path.split("/") if part]
    return any(
        _match_parts(parts, [part for part in pattern.split("/") if part])
        for pattern in patterns
    )


def _component_path(relative_path: str, config: PagesConfig) -> str:
    return str(Path(config.pages_dir) / relative_path)


def plan_page(relative_path: str, config: PagesConfig) -> PageEntry | None:
    """Plan the page a component file creates.

    Args:
        relative_path: File path relative to ``config.pages_dir``.
        config: Page creator configuration.

    Returns:
        The :class:`PageEntry` to register, or ``None`` if the file
        should not become a page.
    """
    if not is_valid_page_path(relative_path):
        logger.debug("Skipping special component %s", relative_path)
        return None

    _, extension = posixpath.splitext(relative_path)
    if extension not in config.extensions:
        logger.debug("Skipping %s: extension %r not recognised", relative_path, extension)
        return None

    if is_ignored(relative_path, config.ignore):
        logger.debug("Skipping ignored file %s", relative_path)
        return None

    path = create_path(relative_path)
    component = _component_path(relative_path, config)

    if is_collection_path(relative_path):
        return PageEntry(path=path, component=component, kind=PageKind.COLLECTION)

    if is_client_only_path(relative_path):
        return PageEntry(
            path=path,
            component=component,
            kind=PageKind.CLIENT_ONLY,
            match_path=derive_pattern(path).match_path,
        )

    return PageEntry(path=path, component=component)


def plan_removal(relative_path: str, config: PagesConfig) -> PageRemoval:
    """Plan the page to delete for a removed component file.

    Uses the raw file path; the derived match pattern plays no part.
    """
    return PageRemoval(
        path=create_path(relative_path),
        component=_component_path(relative_path, config),
    )
