"""Guard for the ``filePath`` argument of a page path query."""

import posixpath
from collections.abc import Iterable

from pagepath.config import normalize_extension
from pagepath.errors import ValidationError


def validate_path_query(file_path: str, extensions: Iterable[str]) -> None:
    """Check that *file_path* names a page source file.

    Raises ``ValidationError`` if *file_path* is empty or its extension
    is not one of *extensions*.  Extensions may be given with or without
    the leading dot.
    """
    allowed = {normalize_extension(ext) for ext in extensions}
    if not file_path:
        msg = 'The "filePath" argument of a page path query must not be empty.'
        raise ValidationError(msg)

    _, extension = posixpath.splitext(file_path)
    if extension not in allowed:
        recognised = ", ".join(sorted(allowed)) or "(none)"
        msg = (
            f"The file {file_path!r} used to query a page path does not have "
            f"an extension the page creator recognises. Expected one of: {recognised}"
        )
        raise ValidationError(msg)
