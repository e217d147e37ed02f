"""Routing — page path templates to router patterns and back.

``derive_pattern`` turns ``[param]`` segments into router tokens;
``extract_params`` reads ``{Type.field}`` values out of a resolved path.
"""

from pagepath.routing.match_path import MatchPath, derive_pattern
from pagepath.routing.params import collection_key, extract_params

__all__ = [
    "MatchPath",
    "collection_key",
    "derive_pattern",
    "extract_params",
]
