"""Page creator configuration.

PagesConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pagepath.errors import ConfigurationError

# Option names accepted by PagesConfig.from_dict(), mapped to field names
_OPTION_FIELDS = {
    "path": "pages_dir",
    "pathCheck": "path_check",
    "extensions": "extensions",
    "ignore": "ignore",
}

# Keys the host puts on every plugin options object
_HOST_OPTIONS = frozenset({"plugins"})


def normalize_extension(extension: str) -> str:
    """Return *extension* with a leading dot (``"js"`` -> ``".js"``)."""
    return extension if extension.startswith(".") else f".{extension}"


@dataclass(frozen=True, slots=True)
class PagesConfig:
    """Page creator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = PagesConfig(pages_dir="site/pages", ignore=("**/*.spec.js",))
    """

    # Directory holding page components; joined with relative paths
    pages_dir: str | Path = "src/pages"

    # Whether the discovery pass should require pages_dir to exist
    path_check: bool = True

    # Recognised page component extensions, stored with a leading dot
    extensions: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")

    # Glob patterns (relative to pages_dir) that never become pages
    ignore: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        normalized = tuple(normalize_extension(ext) for ext in self.extensions)
        object.__setattr__(self, "extensions", normalized)

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "PagesConfig":
        """Build a config from plugin options.

        ``path`` is required; ``pathCheck``, ``extensions`` and ``ignore``
        are optional.  ``plugins``, which the host adds to every options
        object, is skipped.

        Raises ``ConfigurationError`` for a missing ``path`` or an
        unknown option name.
        """
        unknown = sorted(set(options) - set(_OPTION_FIELDS) - _HOST_OPTIONS)
        if unknown:
            msg = f"Unknown page creator option(s): {', '.join(unknown)}"
            raise ConfigurationError(msg)

        pages_dir = options.get("path")
        if not pages_dir:
            msg = '"path" is a required option for the page creator.'
            raise ConfigurationError(msg)

        kwargs: dict[str, Any] = {"pages_dir": pages_dir}
        if "pathCheck" in options:
            kwargs["path_check"] = bool(options["pathCheck"])
        if "extensions" in options:
            kwargs["extensions"] = tuple(options["extensions"])
        if "ignore" in options:
            ignore = options["ignore"]
            kwargs["ignore"] = (ignore,) if isinstance(ignore, str) else tuple(ignore)
        return cls(**kwargs)
