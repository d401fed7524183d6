"""Resolution of dotnet-version specifiers into installer arguments."""

from __future__ import annotations

import logging
from typing import Optional

from constants import Constants
from errors import InvalidSpecifierError
from platforms import Platform
from .models import ArgumentKind, ResolvedArgument
from .parser import (
    is_exact_version,
    is_numeric_tag,
    is_valid_range,
    normalize_specifier,
    split_channel,
)
from .release_index import HttpReleaseIndex, ReleaseIndexSource

logger = logging.getLogger(__name__)


def supports_quality(major: str) -> bool:
    """Return True when channel installs of ``major`` accept a quality tier."""
    return is_numeric_tag(major) and int(major) >= Constants.QUALITY_MIN_MAJOR


class DotnetVersionResolver:
    """Turn a loose version specifier into an exact version or a channel.

    Accepted forms are A.B.C (exact version), A.B / A.B.x (channel) and
    A / A.x (latest channel of major A, looked up in the release index).
    An empty specifier resolves to nothing so the installer uses its default.
    """

    def __init__(self, index: Optional[ReleaseIndexSource] = None):
        self.index = index or HttpReleaseIndex()

    def resolve(self, specifier: Optional[str]) -> ResolvedArgument:
        """Resolve a specifier without any platform tagging.

        Raises:
            InvalidSpecifierError: specifier is not a semantic version range.
            ChannelNotFoundError: no channel for the requested major.
            TransportError: release index could not be fetched.
        """
        spec = normalize_specifier(specifier)
        if not spec:
            logger.debug("Empty dotnet-version, deferring to installer default")
            return ResolvedArgument.unresolved()

        if not is_valid_range(spec):
            raise InvalidSpecifierError(spec)

        if is_exact_version(spec):
            return ResolvedArgument(kind=ArgumentKind.EXACT_VERSION, value=spec)

        major, minor = split_channel(spec)
        if not is_numeric_tag(major):
            logger.debug("Specifier %s is a range without a numeric major; no argument produced", spec)
            return ResolvedArgument.unresolved()

        if is_numeric_tag(minor):
            value = f"{major}.{minor}"
        else:
            value = self.index.latest_channel(major, requested=spec)

        return ResolvedArgument(
            kind=ArgumentKind.CHANNEL,
            value=value,
            supports_quality=supports_quality(major),
        )

    def create_dotnet_version(self, specifier: Optional[str], platform: Platform) -> ResolvedArgument:
        """Resolve a specifier and tag it with the platform's flag spelling."""
        resolved = self.resolve(specifier).for_platform(platform)
        if resolved.is_resolved:
            logger.info("Resolved dotnet-version '%s' to %s %s", normalize_specifier(specifier), resolved.flag, resolved.value)
        return resolved
