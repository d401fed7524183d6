"""Version specifier parsing and resolution for .NET SDK installs."""

from .models import ArgumentKind, ReleaseIndexEntry, ResolvedArgument
from .release_index import (
    FileReleaseIndex,
    HttpReleaseIndex,
    ReleaseIndexSource,
    StaticReleaseIndex,
)
from .resolver import DotnetVersionResolver

__all__ = [
    "ArgumentKind",
    "ReleaseIndexEntry",
    "ResolvedArgument",
    "ReleaseIndexSource",
    "HttpReleaseIndex",
    "FileReleaseIndex",
    "StaticReleaseIndex",
    "DotnetVersionResolver",
]
